"""Turns argument lists back into command lines.

Each argument is quoted so that the argument extractor reads it back
unchanged. Arguments containing a double-quote are emitted without escaping
it and do not survive a round trip.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cmdlex.limits import BACKSLASH, QUOTE, TERMINATOR

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Backslash is included so a trailing run always sits before a closing quote.
_NEEDS_QUOTING = frozenset({" ", "\t", BACKSLASH})


def needs_quoting(argument: str) -> bool:
    """Return True when *argument* must be wrapped in double-quotes."""
    return not argument or any(ch in _NEEDS_QUOTING for ch in argument)


def quote_argument(argument: str) -> str:
    """Encode a single argument for a command line."""
    if TERMINATOR in argument:
        logger.warning("Argument %r contains a NUL; parsing will stop there", argument)
    if not needs_quoting(argument):
        return argument
    # Double the trailing backslash run so the closing quote is not escaped.
    trailing = len(argument) - len(argument.rstrip(BACKSLASH))
    return f"{QUOTE}{argument}{BACKSLASH * trailing}{QUOTE}"


def join_arguments(arguments: Iterable[str]) -> str:
    """Encode each argument and join them with single spaces."""
    return " ".join(quote_argument(argument) for argument in arguments)


def build_command_line(executable_name: str, arguments: Iterable[str]) -> str:
    """Encode an executable name followed by its arguments."""
    return join_arguments([executable_name, *arguments])

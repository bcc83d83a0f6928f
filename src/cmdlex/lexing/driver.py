"""Collects all arguments from a command line up to a configured bound."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cmdlex.lexing.arg import scan_argument
from cmdlex.lexing.scanner import skip_separators, take_until_terminator
from cmdlex.limits import DEFAULT_MAX_ARGUMENTS

if TYPE_CHECKING:
    from cmdlex.lexing.trace import StateObserver

logger = logging.getLogger(__name__)


class TooManyArgumentsError(ValueError):
    """Raised when a command line holds more arguments than allowed."""

    def __init__(self, max_arguments: int) -> None:
        super().__init__(f"more than {max_arguments} arguments")
        self.max_arguments = max_arguments


def scan_arguments(
    text: str,
    start: int = 0,
    max_arguments: int = DEFAULT_MAX_ARGUMENTS,
    observer: StateObserver | None = None,
) -> list[str]:
    """Extract every argument in *text* from *start* onward.

    *text* must already be cut at the terminator. Stops once only separators
    remain. Empty arguments (``""``) are kept.
    """
    if max_arguments < 0:
        raise ValueError(f"max_arguments must be non-negative, got {max_arguments}")

    arguments: list[str] = []
    length = len(text)
    pos = skip_separators(text, start)
    while pos < length:
        if len(arguments) == max_arguments:
            logger.debug("Argument limit %d reached at offset %d", max_arguments, pos)
            raise TooManyArgumentsError(max_arguments)
        argument, pos = scan_argument(text, pos, observer)
        arguments.append(argument)
        pos = skip_separators(text, pos)
    return arguments


def lex_arguments(
    text: str,
    max_arguments: int = DEFAULT_MAX_ARGUMENTS,
    observer: StateObserver | None = None,
) -> list[str]:
    """Split *text*, which holds no executable name, into arguments."""
    return scan_arguments(take_until_terminator(text), 0, max_arguments, observer)

"""Public entry points for splitting and building command lines.

On Windows every program splits its own command line. The Visual C++ runtime
(which builds ``argv`` for ``main``), the .NET runtime and the Win32
``CommandLineToArgvW`` API all do it slightly differently, mainly in how they
treat double-quotes and backslashes. :class:`Lexer` reproduces the Visual C++
runtime rules exactly and wraps the Win32 API for comparison.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, overload

from cmdlex.config import LexerConfig
from cmdlex.lexing.driver import scan_arguments
from cmdlex.lexing.first_arg import scan_first_argument
from cmdlex.lexing.scanner import take_until_terminator
from cmdlex.models import ParseResult
from cmdlex.native import native_parse_exe_and_args
from cmdlex.quoting import build_command_line as _build_command_line
from cmdlex.quoting import join_arguments

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmdlex.lexing.trace import StateObserver

logger = logging.getLogger(__name__)


class Lexer:
    """Splits command lines the Visual C++ runtime way, and builds them back."""

    def __init__(self, config: LexerConfig | None = None) -> None:
        self.config = config or LexerConfig()

    @property
    def max_argument_count(self) -> int:
        return self.config.max_argument_count

    def parse_exe_and_args(
        self,
        command_line: str,
        observer: StateObserver | None = None,
    ) -> ParseResult:
        """Split *command_line* into an executable name and its arguments.

        Raises:
            TooManyArgumentsError: More than ``max_argument_count`` arguments.
        """
        text = take_until_terminator(command_line)
        executable_name, pos = scan_first_argument(text)
        arguments = scan_arguments(text, pos, self.max_argument_count, observer)
        logger.debug(
            "Parsed %r into executable %r and %d arguments",
            command_line,
            executable_name,
            len(arguments),
        )
        return ParseResult.from_tokens(executable_name, arguments)

    def parse_args(self, command_line: str) -> list[str]:
        """Split *command_line*, discarding the executable name."""
        return list(self.parse_exe_and_args(command_line).arguments)

    def build_command_line(self, executable_name: str, arguments: Iterable[str]) -> str:
        return _build_command_line(executable_name, arguments)

    def args_to_command_line(self, arguments: Iterable[str]) -> str:
        return join_arguments(arguments)

    def native_parse_exe_and_args(self, command_line: str) -> ParseResult:
        """Split *command_line* with the Win32 ``CommandLineToArgvW`` API."""
        return native_parse_exe_and_args(command_line)

    def native_parse_args(self, command_line: str) -> list[str]:
        return list(self.native_parse_exe_and_args(command_line).arguments)


_default_lexer = Lexer()


def parse_exe_and_args(command_line: str) -> ParseResult:
    """Split *command_line* with the default argument limit."""
    return _default_lexer.parse_exe_and_args(command_line)


def parse_args(command_line: str) -> list[str]:
    """Split *command_line* and return only its arguments."""
    return _default_lexer.parse_args(command_line)


@overload
def build_command_line(arguments: Iterable[str], /) -> str: ...


@overload
def build_command_line(executable_name: str, arguments: Iterable[str], /) -> str: ...


def build_command_line(first: str | Iterable[str], arguments: Iterable[str] | None = None) -> str:
    """Build a command line from arguments, optionally led by an executable name."""
    if arguments is None:
        if isinstance(first, str):
            raise TypeError("build_command_line() needs an argument list, not a single string")
        return join_arguments(first)
    if not isinstance(first, str):
        raise TypeError("executable_name must be a string")
    return _build_command_line(first, arguments)

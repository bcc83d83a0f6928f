"""cmdlex: Windows command-line splitting and quoting, Visual C++ runtime style."""

from cmdlex.config import LexerConfig
from cmdlex.lexer import Lexer, build_command_line, parse_args, parse_exe_and_args
from cmdlex.lexing.driver import TooManyArgumentsError
from cmdlex.models import ParseResult
from cmdlex.native import NativeSplitterUnavailableError, native_parse_exe_and_args

__all__ = [
    "Lexer",
    "LexerConfig",
    "NativeSplitterUnavailableError",
    "ParseResult",
    "TooManyArgumentsError",
    "build_command_line",
    "native_parse_exe_and_args",
    "parse_args",
    "parse_exe_and_args",
]

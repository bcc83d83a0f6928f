"""Visual C++ runtime command-line lexing."""

from cmdlex.lexing.arg import remove_argument, scan_argument
from cmdlex.lexing.driver import TooManyArgumentsError, lex_arguments, scan_arguments
from cmdlex.lexing.first_arg import remove_first_argument, scan_first_argument
from cmdlex.lexing.scanner import is_separator, skip_separators, take_until_terminator
from cmdlex.lexing.states import ArgState
from cmdlex.lexing.trace import StateLog, StateLogEntry, StateObserver, to_literal_format

__all__ = [
    "ArgState",
    "StateLog",
    "StateLogEntry",
    "StateObserver",
    "TooManyArgumentsError",
    "is_separator",
    "lex_arguments",
    "remove_argument",
    "remove_first_argument",
    "scan_argument",
    "scan_arguments",
    "scan_first_argument",
    "skip_separators",
    "take_until_terminator",
    "to_literal_format",
]

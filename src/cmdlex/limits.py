"""Lexical constants and numeric limits - no circular dependencies."""

from __future__ import annotations

SEPARATORS: frozenset[str] = frozenset({" ", "\t"})
"""The only characters that delimit tokens outside quotes."""

TERMINATOR = "\0"
"""Input processing stops at the first occurrence of this character."""

QUOTE = '"'
BACKSLASH = "\\"

DEFAULT_MAX_ARGUMENTS = 250
"""Upper bound on argument tokens per parse, executable name excluded."""

MAX_ARGUMENTS_ENV_VAR = "CMDLEX_MAX_ARGUMENTS"

MAX_LOG_LINES = 2000
MAX_LOG_MESSAGE_LENGTH = 4096

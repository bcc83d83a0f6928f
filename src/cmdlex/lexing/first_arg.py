"""Executable-name extraction.

The first token is always a file name or path, and double-quote is not a legal
path character, so its rules are simpler than those for arguments: a quote
toggles quoting and is dropped, everything else (backslashes included) is
copied as-is.
"""

from __future__ import annotations

from cmdlex.limits import QUOTE, SEPARATORS


def scan_first_argument(text: str, start: int = 0) -> tuple[str, int]:
    """Scan the executable name starting at *start*.

    Returns the decoded name and the position of the separator that ended it
    (or ``len(text)``). The separator itself is left unconsumed.
    """
    chars: list[str] = []
    inside_quotes = False
    for pos in range(start, len(text)):
        ch = text[pos]
        if ch == QUOTE:
            inside_quotes = not inside_quotes
            continue
        if not inside_quotes and ch in SEPARATORS:
            return "".join(chars), pos
        chars.append(ch)
    return "".join(chars), len(text)


def remove_first_argument(text: str) -> tuple[str, str]:
    """Split *text* into the executable name and the unconsumed remainder."""
    name, end = scan_first_argument(text)
    return name, text[end:]

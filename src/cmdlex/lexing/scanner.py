"""Separator and terminator recognition."""

from __future__ import annotations

from cmdlex.limits import SEPARATORS, TERMINATOR


def is_separator(ch: str) -> bool:
    """Return True for space and horizontal tab."""
    return ch in SEPARATORS


def take_until_terminator(text: str) -> str:
    """Return *text* up to, but not including, the first terminator."""
    index = text.find(TERMINATOR)
    if index < 0:
        return text
    return text[:index]


def skip_separators(text: str, pos: int = 0) -> int:
    """Return the position of the first non-separator at or after *pos*."""
    length = len(text)
    while pos < length and text[pos] in SEPARATORS:
        pos += 1
    return pos

"""Argument extraction following the Visual C++ runtime quoting rules.

Rules, applied after skipping leading separators:

* ``2n`` backslashes followed by ``"`` produce ``n`` backslashes and the quote
  toggles quoting. Inside quotes, a toggling quote immediately followed by a
  second ``"`` is instead one literal ``"`` and quoting continues.
* ``2n + 1`` backslashes followed by ``"`` produce ``n`` backslashes and a
  literal ``"``.
* Backslashes not followed by ``"`` are literal.
* Outside quotes, a separator ends the argument and is left unconsumed.

The character right after a closing quote is copied verbatim unless it is a
separator or another quote; a backslash in that position does not start a
backslash run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdlex.lexing.states import ArgState
from cmdlex.limits import BACKSLASH, QUOTE, SEPARATORS

if TYPE_CHECKING:
    from cmdlex.lexing.trace import StateObserver


def scan_argument(
    text: str,
    start: int = 0,
    observer: StateObserver | None = None,
) -> tuple[str, int]:
    """Scan one argument from *text* starting at *start*.

    Returns the decoded argument and the position where scanning stopped: the
    separator that ended the argument, or ``len(text)``.
    """
    chars: list[str] = []
    state = ArgState.START
    backslashes = 0
    pos = start
    length = len(text)

    while pos < length:
        ch = text[pos]
        if observer is not None:
            observer.record("fetch char", state, ch, backslashes, "".join(chars))

        # Each pass either consumes ch (break) or moves to a state that
        # re-examines it (fall through to the reinspect trace).
        while True:
            if state is ArgState.START:
                state = ArgState.LEADING_WHITESPACE

            elif state is ArgState.LEADING_WHITESPACE:
                if ch in SEPARATORS:
                    break
                state = ArgState.SCANNING_BACKSLASHES_OUTSIDE_QUOTES
                backslashes = 0

            elif state is ArgState.SCANNING_BACKSLASHES_OUTSIDE_QUOTES:
                if ch == BACKSLASH:
                    backslashes += 1
                    break
                if ch == QUOTE:
                    state = ArgState.QUOTE_AFTER_BACKSLASHES_OUTSIDE_QUOTES
                else:
                    state = ArgState.EMITTING_BACKSLASHES_OUTSIDE_QUOTES

            elif state is ArgState.QUOTE_AFTER_BACKSLASHES_OUTSIDE_QUOTES:
                odd = backslashes % 2 == 1
                backslashes //= 2
                if odd:
                    state = ArgState.EMITTING_BACKSLASHES_OUTSIDE_QUOTES
                else:
                    state = ArgState.EMITTING_BACKSLASHES_OUTSIDE_QUOTES_GOING_INSIDE_QUOTES
                    break

            elif state is ArgState.EMITTING_BACKSLASHES_OUTSIDE_QUOTES:
                chars.append(BACKSLASH * backslashes)
                backslashes = 0
                state = ArgState.CHECK_FOR_ARGUMENT_END_OUTSIDE_QUOTES

            elif state is ArgState.CHECK_FOR_ARGUMENT_END_OUTSIDE_QUOTES:
                if ch in SEPARATORS:
                    return _finish(chars, 0, pos, observer)
                chars.append(ch)
                state = ArgState.SCANNING_BACKSLASHES_OUTSIDE_QUOTES
                break

            elif state is ArgState.EMITTING_BACKSLASHES_OUTSIDE_QUOTES_GOING_INSIDE_QUOTES:
                chars.append(BACKSLASH * backslashes)
                backslashes = 0
                state = ArgState.SCANNING_BACKSLASHES_INSIDE_QUOTES

            elif state is ArgState.SCANNING_BACKSLASHES_INSIDE_QUOTES:
                if ch == BACKSLASH:
                    backslashes += 1
                    break
                if ch == QUOTE:
                    state = ArgState.QUOTE_AFTER_BACKSLASHES_INSIDE_QUOTES
                else:
                    state = ArgState.EMITTING_BACKSLASHES_INSIDE_QUOTES

            elif state is ArgState.QUOTE_AFTER_BACKSLASHES_INSIDE_QUOTES:
                odd = backslashes % 2 == 1
                backslashes //= 2
                if odd:
                    state = ArgState.EMITTING_BACKSLASHES_INSIDE_QUOTES
                else:
                    state = ArgState.CHECK_FOR_TWO_QUOTES_AFTER_BACKSLASHES_INSIDE_QUOTES
                    break

            elif state is ArgState.EMITTING_BACKSLASHES_INSIDE_QUOTES:
                chars.append(BACKSLASH * backslashes)
                chars.append(ch)
                backslashes = 0
                state = ArgState.SCANNING_BACKSLASHES_INSIDE_QUOTES
                break

            elif state is ArgState.CHECK_FOR_TWO_QUOTES_AFTER_BACKSLASHES_INSIDE_QUOTES:
                if ch == QUOTE:
                    state = ArgState.EMITTING_BACKSLASHES_INSIDE_QUOTES_STAYING_INSIDE_QUOTES
                else:
                    state = ArgState.EMITTING_BACKSLASHES_INSIDE_QUOTES_GOING_OUTSIDE_QUOTES

            elif state is ArgState.EMITTING_BACKSLASHES_INSIDE_QUOTES_GOING_OUTSIDE_QUOTES:
                chars.append(BACKSLASH * backslashes)
                backslashes = 0
                state = ArgState.CHECK_FOR_ARGUMENT_END_INSIDE_QUOTES_GOING_OUTSIDE_QUOTES

            elif state is ArgState.EMITTING_BACKSLASHES_INSIDE_QUOTES_STAYING_INSIDE_QUOTES:
                chars.append(BACKSLASH * backslashes)
                chars.append(QUOTE)
                backslashes = 0
                state = ArgState.SCANNING_BACKSLASHES_INSIDE_QUOTES
                break

            elif state is ArgState.CHECK_FOR_ARGUMENT_END_INSIDE_QUOTES_GOING_OUTSIDE_QUOTES:
                if ch in SEPARATORS:
                    return _finish(chars, 0, pos, observer)
                chars.append(ch)
                state = ArgState.SCANNING_BACKSLASHES_OUTSIDE_QUOTES
                break

            else:  # pragma: no cover
                raise AssertionError(f"unexpected state {state}")

            if observer is not None:
                observer.record("reinspect char", state, ch, backslashes, "".join(chars))

        pos += 1

    return _finish(chars, backslashes, length, observer)


def _finish(
    chars: list[str],
    backslashes: int,
    pos: int,
    observer: StateObserver | None,
) -> tuple[str, int]:
    if backslashes:
        if observer is not None:
            observer.record(
                "flushing final backslashes",
                ArgState.EMIT_FINAL_BACKSLASHES,
                None,
                backslashes,
                "".join(chars),
            )
        chars.append(BACKSLASH * backslashes)
    argument = "".join(chars)
    if observer is not None:
        observer.record("final result", ArgState.END, None, 0, argument)
    return argument, pos


def remove_argument(
    text: str,
    observer: StateObserver | None = None,
) -> tuple[str, str]:
    """Split *text* into its first argument and the unconsumed remainder."""
    argument, end = scan_argument(text, 0, observer)
    return argument, text[end:]

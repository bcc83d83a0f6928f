"""State tracing for the argument extraction automaton.

Pass a :class:`StateLog` (or anything implementing :class:`StateObserver`) to
the extraction functions to see every state the automaton visits, the
character under inspection, the pending backslash count and the partial
argument at that point.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from cmdlex.lexing.states import ArgState

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_END_OF_INPUT_MARK = "¶"

_SINGLE_CHAR_ESCAPES = {
    "'": "\\'",
    '"': '\\"',
    "\\": "\\\\",
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}

# Control, format, line/paragraph separators, unassigned, private use, surrogates.
_HEX_ESCAPED_CATEGORIES = frozenset({"Cc", "Cf", "Zl", "Zp", "Cn", "Co", "Cs"})


def to_literal_format(text: str) -> str:
    """Render *text* the way it would be written in a C-style string literal."""
    out: list[str] = []
    for ch in text:
        escape = _SINGLE_CHAR_ESCAPES.get(ch)
        if escape is not None:
            out.append(escape)
        elif unicodedata.category(ch) in _HEX_ESCAPED_CATEGORIES:
            out.append(f"\\x{ord(ch):04X}")
        else:
            out.append(ch)
    return "".join(out)


class StateObserver(Protocol):
    """Receives one call per automaton step."""

    def record(
        self,
        message: str,
        state: ArgState,
        char: str | None,
        backslashes: int,
        argument: str,
    ) -> None: ...


@dataclass(frozen=True, slots=True)
class StateLogEntry:
    """One automaton step."""

    message: str
    state: ArgState
    char: str | None  # None at end of input
    backslashes: int
    argument: str

    def __str__(self) -> str:
        char = _END_OF_INPUT_MARK if self.char is None else to_literal_format(self.char)
        return (
            f"({self.message}, {self.state.value}, '{char}', "
            f'{self.backslashes}, "{to_literal_format(self.argument)}")'
        )


class StateLog(list[StateLogEntry]):
    """Collects :class:`StateLogEntry` records from the automaton."""

    def record(
        self,
        message: str,
        state: ArgState,
        char: str | None,
        backslashes: int,
        argument: str,
    ) -> None:
        self.append(StateLogEntry(message, state, char, backslashes, argument))

    def transitions(self) -> list[ArgState]:
        """Return the visited states in order, collapsing consecutive repeats."""
        states: list[ArgState] = []
        for entry in self:
            if not states or states[-1] is not entry.state:
                states.append(entry.state)
        return states

    def histogram(self) -> dict[ArgState, int]:
        """Count entries per state; every state is present, in enum order."""
        counts = dict.fromkeys(ArgState, 0)
        for entry in self:
            counts[entry.state] += 1
        return counts

    @staticmethod
    def merge_histograms(*histograms: Mapping[ArgState, int]) -> dict[ArgState, int]:
        """Sum histograms key by key."""
        merged = dict.fromkeys(ArgState, 0)
        for histogram in histograms:
            for state, count in histogram.items():
                merged[state] += count
        return merged

    def format(self, with_histogram: bool = False) -> str:
        lines = [str(entry) for entry in self]
        if with_histogram:
            lines.append("")
            lines.extend(format_histogram(self.histogram()))
        return "".join(f"{line}\n" for line in lines)

    def __str__(self) -> str:
        return self.format()


def format_histogram(histogram: Mapping[ArgState, int]) -> Iterable[str]:
    """Yield ``STATE: count`` lines with state names right-aligned."""
    width = max(len(state.value) for state in ArgState)
    for state, count in histogram.items():
        yield f"{state.value:>{width}}: {count:4d}"

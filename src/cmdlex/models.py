"""Result types shared by the runtime and native splitters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class ParseResult:
    """An executable name and its arguments, as split from one command line."""

    executable_name: str
    arguments: tuple[str, ...] = field(default=())

    @classmethod
    def from_tokens(cls, executable_name: str, arguments: Iterable[str]) -> ParseResult:
        return cls(executable_name, tuple(arguments))

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable mapping."""
        return {"executable_name": self.executable_name, "arguments": list(self.arguments)}

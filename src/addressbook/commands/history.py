"""Record of command lines entered during a session."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(slots=True)
class CommandHistory:
    """Every entered command line, oldest first."""

    _entries: list[str] = field(default_factory=list)

    def add(self, command_text: str) -> None:
        self._entries.append(command_text)

    def entries(self) -> Sequence[str]:
        return tuple(self._entries)

    def most_recent_first(self) -> Sequence[str]:
        return tuple(reversed(self._entries))


__all__ = ["CommandHistory"]

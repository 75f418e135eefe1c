from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range [start, start + length) into the original source.

    A span never owns text; resolve it against the source it was lexed from.
    """

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def text(self, source: str) -> str:
        return source[self.start : self.end]

    def location(self, source: str) -> tuple[int, int]:
        """1-based (line, column) of the first character, for user-facing messages."""
        line = source.count("\n", 0, self.start) + 1
        column = self.start - (source.rfind("\n", 0, self.start) + 1) + 1
        return line, column

    def format(self, source: str | None = None) -> str:
        if source is None:
            return f"offset {self.start}"
        line, column = self.location(source)
        return f"{line}:{column}"

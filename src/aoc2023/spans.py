from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Offsets are 0-based; line/column are 1-based, matching how puzzle grids are counted.
    """

    offset: int
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single input."""

    file: str
    start: Position
    end: Position

    @property
    def width(self) -> int:
        return self.end.offset - self.start.offset

    def slice(self, src: str) -> str:
        return src[self.start.offset : self.end.offset]

    def format(self) -> str:
        return f"{self.file}:{self.start.line}:{self.start.column}"

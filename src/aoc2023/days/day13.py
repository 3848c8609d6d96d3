"""Day 13: Point of Incidence.

A mirror line is found by counting mismatched cells across it: none for part 1,
exactly one (the smudge) for part 2.
"""

from __future__ import annotations

from ..errors import ParseError
from ..grid import Grid, grid_lexicon, read_grids

LEXICON = grid_lexicon("mirror patterns", ".#")


def mismatches(rows: tuple[str, ...], split: int) -> int:
    """Cells that differ when ``rows`` is folded between ``split - 1`` and ``split``."""
    above = rows[:split][::-1]
    below = rows[split:]
    return sum(a != b for top, bottom in zip(above, below) for a, b in zip(top, bottom))


def reflection(rows: tuple[str, ...], smudges: int) -> int | None:
    for split in range(1, len(rows)):
        if mismatches(rows, split) == smudges:
            return split
    return None


def summarize(grid: Grid, smudges: int = 0) -> int:
    row = reflection(grid.rows, smudges)
    if row is not None:
        return 100 * row
    column = reflection(grid.columns(), smudges)
    if column is not None:
        return column
    raise ParseError(span=grid.span, message="pattern has no line of reflection")


def part_1(src: str, *, file: str = "<memory>") -> int:
    return sum(summarize(g) for g in read_grids(src, LEXICON, file=file))


def part_2(src: str, *, file: str = "<memory>") -> int:
    return sum(summarize(g, smudges=1) for g in read_grids(src, LEXICON, file=file))

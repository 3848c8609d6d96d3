"""Day 16: The Floor Will Be Lava.

A beam is a ``(cell, heading)`` pair. Mirrors turn it, splitters hit
side-on fork it in two, and a state that was already seen is dropped, so
every walk ends even when the beams loop.
"""

from __future__ import annotations

import logging
from collections import deque

from ..grid import Cell, Grid, grid_lexicon, read_grid

logger = logging.getLogger(__name__)

LEXICON = grid_lexicon("contraption", ".|-/\\")

Heading = tuple[int, int]

NORTH, SOUTH, EAST, WEST = (-1, 0), (1, 0), (0, 1), (0, -1)


def _headings(tile: str, heading: Heading) -> tuple[Heading, ...]:
    dr, dc = heading
    if tile == "/":
        return ((-dc, -dr),)
    if tile == "\\":
        return ((dc, dr),)
    if tile == "|" and dc:
        return (NORTH, SOUTH)
    if tile == "-" and dr:
        return (EAST, WEST)
    return (heading,)


def energized(grid: Grid, start: Cell = (0, 0), heading: Heading = EAST) -> int:
    seen: set[tuple[Cell, Heading]] = set()
    queue = deque([(start, heading)])
    while queue:
        cell, heading = queue.popleft()
        if cell not in grid or (cell, heading) in seen:
            continue
        seen.add((cell, heading))
        for d in _headings(grid[cell], heading):
            queue.append(((cell[0] + d[0], cell[1] + d[1]), d))
    return len({cell for cell, _ in seen})


def entries(grid: Grid) -> list[tuple[Cell, Heading]]:
    """Every edge cell paired with the heading that points into the grid."""
    h, w = grid.height, grid.width
    return (
        [((r, 0), EAST) for r in range(h)]
        + [((r, w - 1), WEST) for r in range(h)]
        + [((0, c), SOUTH) for c in range(w)]
        + [((h - 1, c), NORTH) for c in range(w)]
    )


def part_1(src: str, *, file: str = "<memory>") -> int:
    return energized(read_grid(src, LEXICON, file=file))


def part_2(src: str, *, file: str = "<memory>") -> int:
    grid = read_grid(src, LEXICON, file=file)
    starts = entries(grid)
    logger.debug("trying %d entry beams", len(starts))
    return max(energized(grid, cell, heading) for cell, heading in starts)

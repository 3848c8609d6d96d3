"""Day 17: Clumsy Crucible.

Shortest path with Dijkstra over ``(cell, axis)`` states: from each state the
crucible turns onto the other axis and runs between ``least`` and ``most``
blocks in one go, so the straight-line limit never needs tracking.
"""

from __future__ import annotations

import heapq

from ..errors import ParseError
from ..grid import Cell, Grid, grid_lexicon, read_grid

LEXICON = grid_lexicon("city map", "123456789")

CRUCIBLE = (1, 3)
ULTRA_CRUCIBLE = (4, 10)

HORIZONTAL, VERTICAL = 0, 1


def least_heat_loss(grid: Grid, least: int, most: int) -> int:
    goal = (grid.height - 1, grid.width - 1)
    best: dict[tuple[Cell, int], int] = {}
    queue: list[tuple[int, Cell, int]] = [(0, (0, 0), HORIZONTAL), (0, (0, 0), VERTICAL)]
    while queue:
        loss, cell, axis = heapq.heappop(queue)
        if cell == goal:
            return loss
        if best.get((cell, axis), loss + 1) <= loss:
            continue
        best[(cell, axis)] = loss
        turn = VERTICAL if axis == HORIZONTAL else HORIZONTAL
        for sign in (1, -1):
            dr, dc = (sign, 0) if turn == VERTICAL else (0, sign)
            step_loss = loss
            for n in range(1, most + 1):
                nxt = (cell[0] + dr * n, cell[1] + dc * n)
                if nxt not in grid:
                    break
                step_loss += int(grid[nxt])
                if n >= least:
                    heapq.heappush(queue, (step_loss, nxt, turn))
    raise ParseError(
        span=grid.span,
        message=f"no path to the factory with runs of {least} to {most} blocks",
    )


def part_1(src: str, *, file: str = "<memory>") -> int:
    return least_heat_loss(read_grid(src, LEXICON, file=file), *CRUCIBLE)


def part_2(src: str, *, file: str = "<memory>") -> int:
    return least_heat_loss(read_grid(src, LEXICON, file=file), *ULTRA_CRUCIBLE)

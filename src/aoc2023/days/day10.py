"""Day 10: Pipe Maze.

The loop through ``S`` is walked once. Part 1 is half its length; part 2
counts the enclosed tiles with the shoelace area and Pick's theorem.
"""

from __future__ import annotations

from ..errors import ParseError
from ..grid import Cell, Grid, grid_lexicon, read_grid

LEXICON = grid_lexicon("pipe maze", "|-LJ7F.S")

NORTH, SOUTH, EAST, WEST = (-1, 0), (1, 0), (0, 1), (0, -1)

PIPES: dict[str, frozenset[tuple[int, int]]] = {
    "|": frozenset({NORTH, SOUTH}),
    "-": frozenset({EAST, WEST}),
    "L": frozenset({NORTH, EAST}),
    "J": frozenset({NORTH, WEST}),
    "7": frozenset({SOUTH, WEST}),
    "F": frozenset({SOUTH, EAST}),
}


def _opposite(d: tuple[int, int]) -> tuple[int, int]:
    return (-d[0], -d[1])


def _start(grid: Grid) -> Cell:
    found = list(grid.find("S"))
    if len(found) != 1:
        raise ParseError(span=grid.span, message=f"expected one start tile, found {len(found)}")
    return found[0]


def start_exits(grid: Grid, start: Cell) -> list[tuple[int, int]]:
    """Directions out of ``S`` whose neighbouring pipe connects back."""
    exits = []
    for d in (NORTH, SOUTH, EAST, WEST):
        n = (start[0] + d[0], start[1] + d[1])
        if n in grid and _opposite(d) in PIPES.get(grid[n], ()):
            exits.append(d)
    return exits


def loop(grid: Grid) -> list[Cell]:
    start = _start(grid)
    exits = start_exits(grid, start)
    if len(exits) != 2:
        raise ParseError(
            span=grid.span,
            message=f"start tile connects to {len(exits)} pipes, expected 2",
        )
    path = [start]
    heading = exits[0]
    cell = start
    while True:
        cell = (cell[0] + heading[0], cell[1] + heading[1])
        if cell == start:
            return path
        path.append(cell)
        pipe = PIPES.get(grid[cell])
        if pipe is None or _opposite(heading) not in pipe:
            raise ParseError(span=grid.span, message=f"loop breaks at row {cell[0] + 1}, column {cell[1] + 1}")
        (heading,) = pipe - {_opposite(heading)}
        nxt = (cell[0] + heading[0], cell[1] + heading[1])
        if nxt not in grid:
            raise ParseError(span=grid.span, message=f"loop leaves the map at row {cell[0] + 1}, column {cell[1] + 1}")


def enclosed(path: list[Cell]) -> int:
    twice_area = 0
    for (r1, c1), (r2, c2) in zip(path, path[1:] + path[:1]):
        twice_area += c1 * r2 - c2 * r1
    # Pick: A = i + b/2 - 1
    return abs(twice_area) // 2 - len(path) // 2 + 1


def part_1(src: str, *, file: str = "<memory>") -> int:
    return len(loop(read_grid(src, LEXICON, file=file))) // 2


def part_2(src: str, *, file: str = "<memory>") -> int:
    return enclosed(loop(read_grid(src, LEXICON, file=file)))

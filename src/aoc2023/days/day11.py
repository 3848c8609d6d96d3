"""Day 11: Cosmic Expansion."""

from __future__ import annotations

from ..grid import Cell, Grid, grid_lexicon, read_grid

LEXICON = grid_lexicon("galaxy image", ".#")

GALAXY = "#"


def galaxies(grid: Grid) -> list[Cell]:
    return list(grid.find(GALAXY))


def _expanded(coords: list[int], size: int, factor: int) -> list[int]:
    # Every empty line before a coordinate counts `factor` times.
    occupied = set(coords)
    shift = []
    empty = 0
    for i in range(size):
        shift.append(i + empty * (factor - 1))
        if i not in occupied:
            empty += 1
    return [shift[x] for x in coords]


def _pairwise(values: list[int]) -> int:
    # Sum of |a - b| over all pairs, from the sorted prefix sums.
    total = 0
    prefix = 0
    for i, v in enumerate(sorted(values)):
        total += v * i - prefix
        prefix += v
    return total


def total_distance(grid: Grid, factor: int) -> int:
    found = galaxies(grid)
    rows = _expanded([r for r, _ in found], grid.height, factor)
    cols = _expanded([c for _, c in found], grid.width, factor)
    return _pairwise(rows) + _pairwise(cols)


def part_1(src: str, *, file: str = "<memory>") -> int:
    return total_distance(read_grid(src, LEXICON, file=file), 2)


def part_2(src: str, *, file: str = "<memory>") -> int:
    return total_distance(read_grid(src, LEXICON, file=file), 1_000_000)

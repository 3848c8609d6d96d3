"""Day 14: Parabolic Reflector Dish."""

from __future__ import annotations

from ..grid import grid_lexicon, read_grid, transpose

LEXICON = grid_lexicon("platform", "O#.")

ROUND, CUBE = "O", "#"
SPINS = 1_000_000_000


def tilt_north(rows: tuple[str, ...]) -> tuple[str, ...]:
    # Round rocks roll to the top of each run between cube rocks.
    columns = (
        CUBE.join("".join(sorted(run, reverse=True)) for run in col.split(CUBE))
        for col in transpose(rows)
    )
    return transpose(tuple(columns))


def rotate(rows: tuple[str, ...]) -> tuple[str, ...]:
    """Quarter turn clockwise."""
    return tuple("".join(col) for col in zip(*rows[::-1]))


def spin(rows: tuple[str, ...]) -> tuple[str, ...]:
    for _ in range(4):
        rows = rotate(tilt_north(rows))
    return rows


def load(rows: tuple[str, ...]) -> int:
    height = len(rows)
    return sum(row.count(ROUND) * (height - i) for i, row in enumerate(rows))


def part_1(src: str, *, file: str = "<memory>") -> int:
    return load(tilt_north(read_grid(src, LEXICON, file=file).rows))


def part_2(src: str, *, file: str = "<memory>", spins: int = SPINS) -> int:
    rows = read_grid(src, LEXICON, file=file).rows
    seen: dict[tuple[str, ...], int] = {}
    history: list[tuple[str, ...]] = []
    for n in range(spins):
        if rows in seen:
            start = seen[rows]
            return load(history[start + (spins - start) % (n - start)])
        seen[rows] = n
        history.append(rows)
        rows = spin(rows)
    return load(rows)

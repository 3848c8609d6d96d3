from __future__ import annotations

from types import ModuleType

from . import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
)

DAYS: dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    14: day14,
    15: day15,
    16: day16,
    17: day17,
}

__all__ = ["DAYS"]

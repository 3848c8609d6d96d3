from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType

from .days import DAYS
from .errors import ParseError
from .spans import Position, Span


logger = logging.getLogger(__name__)

PARTS = (1, 2)


@dataclass(frozen=True, slots=True)
class Answer:
    day: int
    part_1: int | None = None
    part_2: int | None = None

    def values(self) -> dict[int, int]:
        out: dict[int, int] = {}
        if self.part_1 is not None:
            out[1] = self.part_1
        if self.part_2 is not None:
            out[2] = self.part_2
        return out


def available_days() -> tuple[int, ...]:
    return tuple(sorted(DAYS))


def _module(day: int) -> ModuleType:
    mod = DAYS.get(day)
    if mod is None:
        days = ", ".join(str(d) for d in available_days())
        raise ValueError(f"no solution for day {day} (available: {days})")
    return mod


def solve_source(day: int, src: str, *, part: int | None = None, file: str = "<memory>") -> Answer:
    mod = _module(day)
    parts = PARTS if part is None else (part,)
    results: dict[str, int] = {}
    for p in parts:
        if p not in PARTS:
            raise ValueError(f"part must be 1 or 2, got {p}")
        results[f"part_{p}"] = getattr(mod, f"part_{p}")(src, file=file)
        logger.debug("day %d part %d -> %d", day, p, results[f"part_{p}"])
    return Answer(day=day, **results)


def _decode(data: bytes, *, file: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        # Everything before the bad byte decoded fine.
        head = data[: e.start].decode("utf-8")
        line = head.count("\n") + 1
        column = len(head) - (head.rfind("\n") + 1) + 1
        pos = Position(offset=len(head), line=line, column=column)
        raise ParseError(
            span=Span(file=file, start=pos, end=pos),
            message=f"invalid UTF-8 byte 0x{data[e.start]:02x}",
            hint="puzzle inputs must be UTF-8 text",
        ) from None


def solve_file(day: int, path: str | Path, *, part: int | None = None) -> Answer:
    p = Path(path).expanduser().resolve()
    logger.info("reading day %d input from %s", day, p)
    src = _decode(p.read_bytes(), file=str(p))
    return solve_source(day, src, part=part, file=str(p))

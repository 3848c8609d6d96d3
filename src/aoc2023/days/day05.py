"""Day 5: If You Give A Seed A Fertilizer.

The almanac is a chain of range maps from ``seed`` to ``location``. Part 2
reads the seeds as ranges, so whole intervals are pushed through each map and
split wherever a map entry starts or ends.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..errors import ParseError
from ..lexer import Lexicon, rule, tokenize
from ..parser import TokenStream, int_value, join_span
from ..spans import Span
from ..tokens import TokenKind


LEXICON = Lexicon(
    name="almanac",
    rules=(
        rule(TokenKind.NUMBER, r"[0-9]+"),
        rule(TokenKind.WORD, r"[a-z]+"),
        rule(TokenKind.DASH, r"-"),
        rule(TokenKind.COLON, r":"),
    ),
)

FIRST = "seed"
LAST = "location"

Interval = tuple[int, int]  # half-open [start, end)


@dataclass(frozen=True, slots=True)
class Entry:
    destination: int
    source: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source + self.length

    @property
    def offset(self) -> int:
        return self.destination - self.source


@dataclass(frozen=True, slots=True)
class RangeMap:
    span: Span
    source: str
    destination: str
    entries: tuple[Entry, ...]  # sorted by source start

    def lookup(self, value: int) -> int:
        for e in self.entries:
            if e.source <= value < e.source_end:
                return value + e.offset
        return value

    def map_interval(self, lo: int, hi: int) -> Iterator[Interval]:
        for e in self.entries:
            if lo >= hi:
                return
            if e.source_end <= lo:
                continue
            if e.source >= hi:
                break
            if lo < e.source:
                yield (lo, e.source)
                lo = e.source
            cut = min(hi, e.source_end)
            yield (lo + e.offset, cut + e.offset)
            lo = cut
        if lo < hi:
            yield (lo, hi)


@dataclass(frozen=True, slots=True)
class Almanac:
    span: Span  # the seeds line
    seeds: tuple[int, ...]
    maps: tuple[RangeMap, ...]

    def location(self, seed: int) -> int:
        value = seed
        for m in self.maps:
            value = m.lookup(value)
        return value

    def locations(self, intervals: Iterable[Interval]) -> list[Interval]:
        current = list(intervals)
        for m in self.maps:
            current = [out for lo, hi in current for out in m.map_interval(lo, hi)]
        return current

    def seed_ranges(self) -> list[Interval]:
        if len(self.seeds) % 2:
            raise ParseError(span=self.span, message="seed ranges need an even number of values")
        pairs = zip(self.seeds[::2], self.seeds[1::2])
        return [(start, start + length) for start, length in pairs]


def _map(ts: TokenStream) -> RangeMap:
    head = ts.expect(TokenKind.WORD)
    ts.expect(TokenKind.DASH)
    ts.expect(TokenKind.WORD, "to")
    ts.expect(TokenKind.DASH)
    dest = ts.expect(TokenKind.WORD)
    ts.expect(TokenKind.WORD, "map")
    ts.expect(TokenKind.COLON)
    entries: list[Entry] = []
    while ts.at(TokenKind.NUMBER):
        d = int_value(ts.next(), bits=64)
        s = int_value(ts.expect(TokenKind.NUMBER), bits=64)
        n = int_value(ts.expect(TokenKind.NUMBER), bits=64)
        entries.append(Entry(destination=d, source=s, length=n))
    entries.sort(key=lambda e: e.source)
    for a, b in zip(entries, entries[1:]):
        if b.source < a.source_end:
            raise ParseError(
                span=join_span(head, ts.last),
                message=f"overlapping source ranges in {head.lexeme}-to-{dest.lexeme} map",
            )
    return RangeMap(
        span=join_span(head, ts.last),
        source=head.lexeme,
        destination=dest.lexeme,
        entries=tuple(entries),
    )


def parse(src: str, *, file: str = "<memory>") -> Almanac:
    ts = TokenStream(tokenize(src, LEXICON, file=file))
    head = ts.expect(TokenKind.WORD, "seeds")
    ts.expect(TokenKind.COLON)
    seeds: list[int] = []
    while ts.at(TokenKind.NUMBER):
        seeds.append(int_value(ts.next(), bits=64))
    seeds_span = join_span(head, ts.last)

    maps: list[RangeMap] = []
    category = FIRST
    while not ts.at(TokenKind.EOF):
        m = _map(ts)
        if m.source != category:
            raise ParseError(
                span=m.span,
                message=f"map from {m.source!r} does not follow {category!r}",
                hint=f"expected a {category}-to-... map",
            )
        category = m.destination
        maps.append(m)
    ts.expect_eof()
    if category != LAST:
        raise ParseError(
            span=ts.last.span,
            message=f"almanac stops at {category!r}, not {LAST!r}",
        )
    return Almanac(span=seeds_span, seeds=tuple(seeds), maps=tuple(maps))


def part_1(src: str, *, file: str = "<memory>") -> int:
    almanac = parse(src, file=file)
    return min(almanac.location(s) for s in almanac.seeds)


def part_2(src: str, *, file: str = "<memory>") -> int:
    almanac = parse(src, file=file)
    return min(lo for lo, _ in almanac.locations(almanac.seed_ranges()))

"""Day 2: Cube Conundrum."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..errors import ParseError
from ..lexer import Lexicon, rule, tokenize
from ..parser import TokenStream, int_value, join_span
from ..spans import Span
from ..tokens import TokenKind


LEXICON = Lexicon(
    name="cube game",
    rules=(
        rule(TokenKind.NUMBER, r"[0-9]+"),
        rule(TokenKind.WORD, r"[A-Za-z]+"),
        rule(TokenKind.COLON, r":"),
        rule(TokenKind.SEMI, r";"),
        rule(TokenKind.COMMA, r","),
    ),
)


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


@dataclass(frozen=True, slots=True)
class Reveal:
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def from_counts(cls, counts: Iterable[tuple[int, Color]]) -> "Reveal":
        totals = {c: 0 for c in Color}
        for n, color in counts:
            totals[color] += n
        return cls(red=totals[Color.RED], green=totals[Color.GREEN], blue=totals[Color.BLUE])

    def within(self, limit: "Reveal") -> bool:
        return self.red <= limit.red and self.green <= limit.green and self.blue <= limit.blue

    def union(self, other: "Reveal") -> "Reveal":
        return Reveal(
            red=max(self.red, other.red),
            green=max(self.green, other.green),
            blue=max(self.blue, other.blue),
        )

    @property
    def power(self) -> int:
        return self.red * self.green * self.blue


# The bag loaded for part 1.
BAG = Reveal(red=12, green=13, blue=14)


@dataclass(frozen=True, slots=True)
class Game:
    span: Span
    number: int
    reveals: tuple[Reveal, ...]

    def possible_with(self, bag: Reveal) -> bool:
        return all(r.within(bag) for r in self.reveals)

    def minimum_bag(self) -> Reveal:
        bag = Reveal()
        for r in self.reveals:
            bag = bag.union(r)
        return bag


def _color(ts: TokenStream) -> Color:
    tok = ts.expect(TokenKind.WORD)
    try:
        return Color(tok.lexeme)
    except ValueError:
        raise ParseError(
            span=tok.span,
            message=f"unknown colour {tok.lexeme!r}",
            hint="expected one of: " + ", ".join(c.value for c in Color),
        ) from None


def _reveal(ts: TokenStream) -> Reveal:
    counts = []
    while True:
        n = int_value(ts.expect(TokenKind.NUMBER))
        counts.append((n, _color(ts)))
        if ts.accept(TokenKind.COMMA) is None:
            return Reveal.from_counts(counts)


def _game(ts: TokenStream) -> Game:
    head = ts.expect(TokenKind.WORD, "Game")
    number = int_value(ts.expect(TokenKind.NUMBER))
    ts.expect(TokenKind.COLON)
    reveals = [_reveal(ts)]
    while ts.accept(TokenKind.SEMI) is not None:
        reveals.append(_reveal(ts))
    return Game(span=join_span(head, ts.last), number=number, reveals=tuple(reveals))


def parse(src: str, *, file: str = "<memory>") -> list[Game]:
    ts = TokenStream(tokenize(src, LEXICON, file=file))
    games: list[Game] = []
    while not ts.at(TokenKind.EOF):
        games.append(_game(ts))
    ts.expect_eof()
    return games


def part_1(src: str, *, file: str = "<memory>") -> int:
    return sum(g.number for g in parse(src, file=file) if g.possible_with(BAG))


def part_2(src: str, *, file: str = "<memory>") -> int:
    return sum(g.minimum_bag().power for g in parse(src, file=file))

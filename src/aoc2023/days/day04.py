"""Day 4: Scratchcards."""

from __future__ import annotations

from dataclasses import dataclass

from ..lexer import Lexicon, rule, tokenize
from ..parser import TokenStream, int_value
from ..tokens import TokenKind


LEXICON = Lexicon(
    name="scratchcards",
    rules=(
        rule(TokenKind.NUMBER, r"[0-9]+"),
        rule(TokenKind.WORD, r"[A-Za-z]+"),
        rule(TokenKind.COLON, r":"),
        rule(TokenKind.PIPE, r"\|"),
    ),
)


@dataclass(frozen=True, slots=True)
class Card:
    number: int
    winning: frozenset[int]
    ours: frozenset[int]

    @property
    def matches(self) -> int:
        return len(self.winning & self.ours)

    @property
    def points(self) -> int:
        k = self.matches
        return 1 << (k - 1) if k else 0


def _numbers(ts: TokenStream) -> frozenset[int]:
    # Card numbers are single bytes.
    out: set[int] = set()
    while ts.at(TokenKind.NUMBER):
        out.add(int_value(ts.next(), bits=8))
    return frozenset(out)


def _card(ts: TokenStream) -> Card:
    ts.expect(TokenKind.WORD, "Card")
    number = int_value(ts.expect(TokenKind.NUMBER))
    ts.expect(TokenKind.COLON)
    winning = _numbers(ts)
    ts.expect(TokenKind.PIPE)
    ours = _numbers(ts)
    return Card(number=number, winning=winning, ours=ours)


def parse(src: str, *, file: str = "<memory>") -> list[Card]:
    ts = TokenStream(tokenize(src, LEXICON, file=file))
    cards: list[Card] = []
    while not ts.at(TokenKind.EOF):
        cards.append(_card(ts))
    ts.expect_eof()
    return cards


def total_cards(cards: list[Card]) -> int:
    """Count cards once every win has handed out its copies.

    Walking backwards, a card's count is itself plus the counts of the cards it
    copies, which are already final.
    """
    counts = [1] * len(cards)
    for i in range(len(cards) - 1, -1, -1):
        for j in range(i + 1, min(i + 1 + cards[i].matches, len(cards))):
            counts[i] += counts[j]
    return sum(counts)


def part_1(src: str, *, file: str = "<memory>") -> int:
    return sum(c.points for c in parse(src, file=file))


def part_2(src: str, *, file: str = "<memory>") -> int:
    return total_cards(parse(src, file=file))

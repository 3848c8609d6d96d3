"""Day 7: Camel Cards."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from ..errors import ParseError
from ..lexer import Lexicon, rule, tokenize
from ..parser import TokenStream, int_value
from ..tokens import Token, TokenKind


# Hands and bids share an alphabet ("23456" is a valid hand), so the grammar
# tells them apart by position: every line is `hand bid`.
LEXICON = Lexicon(
    name="camel cards",
    rules=(rule(TokenKind.WORD, r"[0-9A-Z]+"),),
)

CARDS = "23456789TJQKA"
JOKER_CARDS = "J23456789TQKA"
HAND_SIZE = 5

# Hand types, weakest first, by their sorted card counts.
TYPES: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1),
    (2, 1, 1, 1),
    (2, 2, 1),
    (3, 1, 1),
    (3, 2),
    (4, 1),
    (5,),
)


@dataclass(frozen=True, slots=True)
class Hand:
    cards: str
    bid: int

    def strength(self, *, jokers: bool = False) -> tuple[int, tuple[int, ...]]:
        order = JOKER_CARDS if jokers else CARDS
        counts = Counter(self.cards)
        wild = counts.pop("J", 0) if jokers else 0
        shape = sorted(counts.values(), reverse=True) or [0]
        shape[0] += wild
        return TYPES.index(tuple(shape)), tuple(order.index(c) for c in self.cards)


def _hand(tok: Token) -> str:
    if len(tok.lexeme) != HAND_SIZE or any(c not in CARDS for c in tok.lexeme):
        raise ParseError(
            span=tok.span,
            message=f"invalid hand {tok.lexeme!r}",
            hint=f"a hand is {HAND_SIZE} cards from {CARDS}",
        )
    return tok.lexeme


def parse(src: str, *, file: str = "<memory>") -> list[Hand]:
    ts = TokenStream(tokenize(src, LEXICON, file=file))
    hands: list[Hand] = []
    while not ts.at(TokenKind.EOF):
        cards = _hand(ts.next())
        bid = int_value(ts.expect(TokenKind.WORD))
        hands.append(Hand(cards=cards, bid=bid))
    ts.expect_eof()
    return hands


def winnings(hands: list[Hand], *, jokers: bool = False) -> int:
    ranked = sorted(hands, key=lambda h: h.strength(jokers=jokers))
    return sum(rank * h.bid for rank, h in enumerate(ranked, start=1))


def part_1(src: str, *, file: str = "<memory>") -> int:
    return winnings(parse(src, file=file))


def part_2(src: str, *, file: str = "<memory>") -> int:
    return winnings(parse(src, file=file), jokers=True)

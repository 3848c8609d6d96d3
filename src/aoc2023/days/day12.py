"""Day 12: Hot Springs."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache

from ..lexer import Lexicon, rule, tokenize
from ..parser import TokenStream, int_value
from ..tokens import TokenKind


LEXICON = Lexicon(
    name="spring records",
    rules=(
        rule(TokenKind.WORD, r"[.#?]+"),
        rule(TokenKind.NUMBER, r"[0-9]+"),
        rule(TokenKind.COMMA, r","),
    ),
)

OPERATIONAL, DAMAGED, UNKNOWN = ".", "#", "?"
FOLDS = 5


@dataclass(frozen=True, slots=True)
class Row:
    springs: str
    groups: tuple[int, ...]

    def unfold(self, times: int = FOLDS) -> "Row":
        return Row(springs=UNKNOWN.join([self.springs] * times), groups=self.groups * times)

    def arrangements(self) -> int:
        springs, groups = self.springs, self.groups

        @cache
        def count(i: int, j: int) -> int:
            if j == len(groups):
                return 0 if DAMAGED in springs[i:] else 1
            if i >= len(springs):
                return 0
            total = 0
            if springs[i] != DAMAGED:
                total += count(i + 1, j)
            end = i + groups[j]
            if (
                springs[i] != OPERATIONAL
                and end <= len(springs)
                and OPERATIONAL not in springs[i:end]
                and (end == len(springs) or springs[end] != DAMAGED)
            ):
                total += count(end + 1, j + 1)
            return total

        return count(0, 0)


def parse(src: str, *, file: str = "<memory>") -> list[Row]:
    ts = TokenStream(tokenize(src, LEXICON, file=file))
    rows: list[Row] = []
    while not ts.at(TokenKind.EOF):
        springs = ts.expect(TokenKind.WORD).lexeme
        groups = [int_value(ts.expect(TokenKind.NUMBER))]
        while ts.accept(TokenKind.COMMA) is not None:
            groups.append(int_value(ts.expect(TokenKind.NUMBER)))
        rows.append(Row(springs=springs, groups=tuple(groups)))
    ts.expect_eof()
    return rows


def part_1(src: str, *, file: str = "<memory>") -> int:
    return sum(r.arrangements() for r in parse(src, file=file))


def part_2(src: str, *, file: str = "<memory>") -> int:
    return sum(r.unfold().arrangements() for r in parse(src, file=file))

"""Day 9: Mirage Maintenance.

Unlike the other days, line breaks are part of this grammar: each line is one
value history.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..lexer import Lexicon, rule, tokenize
from ..parser import TokenStream, int_value
from ..tokens import TokenKind


LEXICON = Lexicon(
    name="oasis report",
    rules=(
        rule(TokenKind.NUMBER, r"(?<![0-9])-?[0-9]+"),
        rule(TokenKind.NEWLINE, r"\r?\n"),
    ),
    filler=" \t",
)


@dataclass(frozen=True, slots=True)
class History:
    values: tuple[int, ...]

    def differences(self) -> "History":
        return History(tuple(b - a for a, b in zip(self.values, self.values[1:])))

    def predict(self) -> int:
        if len(set(self.values)) <= 1:
            return self.values[0] if self.values else 0
        return self.values[-1] + self.differences().predict()

    def predict_back(self) -> int:
        return History(self.values[::-1]).predict()


def parse(src: str, *, file: str = "<memory>") -> list[History]:
    ts = TokenStream(tokenize(src, LEXICON, file=file))
    histories: list[History] = []
    ts.skip(TokenKind.NEWLINE)
    while not ts.at(TokenKind.EOF):
        values: list[int] = []
        while ts.at(TokenKind.NUMBER):
            values.append(int_value(ts.next(), bits=64, signed=True))
        histories.append(History(tuple(values)))
        if ts.skip(TokenKind.NEWLINE) == 0 and not ts.at(TokenKind.EOF):
            raise ts.error("number", "end of line")
    ts.expect_eof()
    return histories


def part_1(src: str, *, file: str = "<memory>") -> int:
    return sum(h.predict() for h in parse(src, file=file))


def part_2(src: str, *, file: str = "<memory>") -> int:
    return sum(h.predict_back() for h in parse(src, file=file))

"""Day 3: Gear Ratios.

The engine schematic is a grid of digit runs (part numbers) and symbols padded
with ``.`` filler. Records keep the 1-based line/column of the tokenizer, and
every neighbour computation saturates at 0 so no coordinate ever goes negative.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import prod

from ..lexer import Lexicon, rule, tokenize
from ..parser import int_value
from ..tokens import Token, TokenKind


Location = tuple[int, int]  # (line, column)

LEXICON = Lexicon(
    name="engine schematic",
    rules=(
        rule(TokenKind.NUMBER, r"[0-9]+"),
        rule(TokenKind.SYMBOL, r"[^0-9A-Za-z\s.]"),
    ),
    filler=". \t\r\n",
)

GEAR = "*"


def _ring(line: int, first: int, last: int) -> Iterator[Location]:
    # Cells around columns first..last on `line`, clamped at 0.
    left = max(first - 1, 0)
    right = last + 1
    above = max(line - 1, 0)
    below = line + 1
    for column in range(left, right + 1):
        if above != line:
            yield (above, column)
        yield (below, column)
    if left != first:
        yield (line, left)
    yield (line, right)


@dataclass(frozen=True, slots=True)
class Number:
    value: int
    line: int
    start_column: int
    end_column: int  # inclusive

    def cells(self) -> Iterator[Location]:
        for column in range(self.start_column, self.end_column + 1):
            yield (self.line, column)

    def boundary(self) -> Iterator[Location]:
        """The 8-connected ring of cells around the digit run."""
        return _ring(self.line, self.start_column, self.end_column)


@dataclass(frozen=True, slots=True)
class Symbol:
    character: str
    line: int
    column: int

    @property
    def location(self) -> Location:
        return (self.line, self.column)

    def neighbours(self) -> Iterator[Location]:
        return _ring(self.line, self.column, self.column)


Record = Number | Symbol


def build_record(tok: Token) -> Record:
    start = tok.span.start
    if tok.kind is TokenKind.NUMBER:
        return Number(
            value=int_value(tok, bits=32),
            line=start.line,
            start_column=start.column,
            end_column=start.column + len(tok.lexeme) - 1,
        )
    if tok.kind is TokenKind.SYMBOL:
        return Symbol(character=tok.lexeme, line=start.line, column=start.column)
    raise TypeError(f"no record for token {tok!r}")


def records(src: str, *, file: str = "<memory>") -> Iterator[Record]:
    for tok in tokenize(src, LEXICON, file=file):
        if tok.kind is TokenKind.EOF:
            return
        yield build_record(tok)


@dataclass(frozen=True, slots=True)
class Schematic:
    numbers: tuple[Number, ...]
    symbols: dict[Location, Symbol]
    occupied: dict[Location, Number]

    @classmethod
    def from_records(cls, recs: Iterable[Record]) -> "Schematic":
        numbers: list[Number] = []
        symbols: dict[Location, Symbol] = {}
        occupied: dict[Location, Number] = {}
        for rec in recs:
            if isinstance(rec, Number):
                for cell in rec.cells():
                    if cell in occupied or cell in symbols:
                        raise ValueError(f"overlapping records at {cell}")
                    occupied[cell] = rec
                numbers.append(rec)
            else:
                if rec.location in occupied or rec.location in symbols:
                    raise ValueError(f"overlapping records at {rec.location}")
                symbols[rec.location] = rec
        return cls(numbers=tuple(numbers), symbols=symbols, occupied=occupied)

    def is_part_number(self, number: Number) -> bool:
        return any(cell in self.symbols for cell in number.boundary())

    def part_numbers(self) -> list[Number]:
        return [n for n in self.numbers if self.is_part_number(n)]

    def part_numbers_by_symbol(self) -> set[Number]:
        """Same active set as part_numbers(), found by walking out from each symbol."""
        found: set[Number] = set()
        for symbol in self.symbols.values():
            found.update(self.adjacent_numbers(symbol))
        return found

    def adjacent_numbers(self, symbol: Symbol) -> set[Number]:
        return {self.occupied[cell] for cell in symbol.neighbours() if cell in self.occupied}

    def sum_of_part_numbers(self) -> int:
        return sum(n.value for n in self.part_numbers())

    def gear_ratios(self) -> Iterator[int]:
        for symbol in self.symbols.values():
            if symbol.character != GEAR:
                continue
            adjacent = self.adjacent_numbers(symbol)
            if len(adjacent) == 2:
                yield prod(n.value for n in adjacent)

    def sum_of_gear_ratios(self) -> int:
        return sum(self.gear_ratios())


def parse(src: str, *, file: str = "<memory>") -> Schematic:
    return Schematic.from_records(records(src, file=file))


def part_1(src: str, *, file: str = "<memory>") -> int:
    return parse(src, file=file).sum_of_part_numbers()


def part_2(src: str, *, file: str = "<memory>") -> int:
    return parse(src, file=file).sum_of_gear_ratios()

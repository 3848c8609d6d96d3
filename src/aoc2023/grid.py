"""Character grids shared by the map-style puzzles.

Each day declares which characters its cells may hold; rows are runs of cell
tokens ended by a line break, and blank lines separate grids. Grid coordinates
are 0-based ``(row, column)`` indices into ``rows``; the spans keep the
1-based source positions for error reporting.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import ParseError
from .lexer import Lexicon, rule, tokenize
from .parser import TokenStream, join_span
from .spans import Position, Span
from .tokens import Token, TokenKind


Cell = tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class Grid:
    span: Span
    rows: tuple[str, ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __contains__(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.height and 0 <= c < self.width

    def __getitem__(self, cell: Cell) -> str:
        r, c = cell
        return self.rows[r][c]

    def find(self, ch: str) -> Iterator[Cell]:
        for r, row in enumerate(self.rows):
            for c, x in enumerate(row):
                if x == ch:
                    yield (r, c)

    def columns(self) -> tuple[str, ...]:
        return transpose(self.rows)


def transpose(rows: tuple[str, ...]) -> tuple[str, ...]:
    return tuple("".join(col) for col in zip(*rows))


def grid_lexicon(name: str, cells: str) -> Lexicon:
    # Trailing blanks are allowed before a line break, nowhere else.
    return Lexicon(
        name=name,
        rules=(
            rule(TokenKind.CELL, f"[{re.escape(cells)}]"),
            rule(TokenKind.NEWLINE, r"[ \t]*\r?\n"),
        ),
        filler="",
    )


def _row(ts: TokenStream) -> tuple[Token, str]:
    first = ts.expect(TokenKind.CELL)
    chars = [first.lexeme]
    while ts.at(TokenKind.CELL):
        chars.append(ts.next().lexeme)
    return first, "".join(chars)


def _grid(ts: TokenStream) -> Grid:
    first, row = _row(ts)
    rows = [row]
    while ts.accept(TokenKind.NEWLINE) is not None and ts.at(TokenKind.CELL):
        tok, row = _row(ts)
        if len(row) != len(rows[0]):
            raise ParseError(
                span=join_span(tok, ts.last),
                message=f"row has {len(row)} cells, expected {len(rows[0])}",
                hint="every row of a grid must be the same width",
            )
        rows.append(row)
    return Grid(span=join_span(first, ts.last), rows=tuple(rows))


def read_grids(src: str, lexicon: Lexicon, *, file: str = "<memory>") -> list[Grid]:
    ts = TokenStream(tokenize(src, lexicon, file=file))
    grids: list[Grid] = []
    ts.skip(TokenKind.NEWLINE)
    while not ts.at(TokenKind.EOF):
        grids.append(_grid(ts))
        ts.skip(TokenKind.NEWLINE)
    ts.expect_eof()
    return grids


def read_grid(src: str, lexicon: Lexicon, *, file: str = "<memory>") -> Grid:
    grids = read_grids(src, lexicon, file=file)
    if len(grids) == 1:
        return grids[0]
    if not grids:
        pos = Position(offset=0, line=1, column=1)
        raise ParseError(span=Span(file=file, start=pos, end=pos), message="empty grid")
    raise ParseError(
        span=grids[1].span,
        message=f"expected one grid, found {len(grids)}",
        hint="remove the blank line between rows",
    )

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import ParseError
from .spans import Position, Span
from .tokens import Token, TokenKind


logger = logging.getLogger(__name__)

DEFAULT_FILLER = " \t\r\n"


@dataclass(frozen=True, slots=True)
class Rule:
    kind: TokenKind
    pattern: re.Pattern[str]


def rule(kind: TokenKind, pattern: str) -> Rule:
    return Rule(kind=kind, pattern=re.compile(pattern))


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Lexical rules for one input format.

    Rules are tried in order at every position and the first non-empty match wins.
    Filler characters are skipped between tokens and never produce a token.
    """

    name: str
    rules: tuple[Rule, ...]
    filler: str = DEFAULT_FILLER

    def describe(self) -> str:
        return ", ".join(r.kind.value for r in self.rules)


@dataclass(slots=True)
class _Cursor:
    file: str
    src: str
    i: int = 0
    line: int = 1
    col: int = 1

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self) -> str:
        if self.eof():
            return ""
        return self.src[self.i]

    def advance(self, n: int = 1) -> None:
        for _ in range(n):
            if self.eof():
                return
            ch = self.src[self.i]
            self.i += 1
            if ch == "\n":
                self.line += 1
                self.col = 1
            else:
                self.col += 1

    def pos(self) -> Position:
        return Position(offset=self.i, line=self.line, column=self.col)


def tokenize(src: str, lexicon: Lexicon, *, file: str = "<memory>") -> Iterator[Token]:
    """Lazily split ``src`` into tokens, ending with a single EOF token."""
    cur = _Cursor(file=file, src=src)
    count = 0

    while not cur.eof():
        ch = cur.peek()

        if ch in lexicon.filler:
            cur.advance()
            continue

        start = cur.pos()
        for r in lexicon.rules:
            m = r.pattern.match(src, cur.i)
            if m and m.end() > cur.i:
                lex = m.group(0)
                cur.advance(len(lex))
                count += 1
                yield Token(r.kind, lex, Span(file=file, start=start, end=cur.pos()))
                break
        else:
            cur.advance()
            raise ParseError(
                span=Span(file=file, start=start, end=cur.pos()),
                message=f"unexpected character {ch!r}",
                hint=f"{lexicon.name} input accepts: {lexicon.describe()}",
            )

    logger.debug("%s: %d tokens from %s", lexicon.name, count, file)
    eof_pos = cur.pos()
    yield Token(TokenKind.EOF, "", Span(file=file, start=eof_pos, end=eof_pos))

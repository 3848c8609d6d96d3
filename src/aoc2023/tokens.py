from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class TokenKind(str, Enum):
    # Literals
    NUMBER = "NUMBER"
    WORD = "WORD"
    SYMBOL = "SYMBOL"
    CELL = "CELL"

    # Structural separators
    COLON = ":"
    SEMI = ";"
    COMMA = ","
    LPAREN = "("
    RPAREN = ")"
    PIPE = "|"
    EQ = "="
    DASH = "-"
    NEWLINE = "NEWLINE"

    EOF = "EOF"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str
    span: Span

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, {self.span.format()})"

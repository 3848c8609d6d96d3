from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import NumberOverflowError, ParseError
from .spans import Span
from .tokens import Token, TokenKind


def _span_of(v: object) -> Span:
    # Tokens and records both carry .span.
    sp = getattr(v, "span", None)
    if sp is None:
        raise TypeError(f"value has no span: {type(v)!r}")
    return sp


def join_span(*vals: object) -> Span:
    """Join spans of tokens/records into a single span (from first to last)."""
    real = [v for v in vals if v is not None]
    if not real:
        raise ValueError("join_span() requires at least one value")
    first = _span_of(real[0])
    last = _span_of(real[-1])
    return Span(file=first.file, start=first.start, end=last.end)


def _token_display(kind: TokenKind) -> str:
    if kind is TokenKind.NEWLINE:
        return "end of line"
    if kind is TokenKind.EOF:
        return "end of input"
    return kind.value


def int_value(tok: Token, *, bits: int = 32, signed: bool = False) -> int:
    """Parse a NUMBER token, rejecting values outside the given integer width."""
    try:
        value = int(tok.lexeme)
    except ValueError:
        raise ParseError(span=tok.span, message=f"invalid integer {tok.lexeme!r}") from None
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    if not lo <= value <= hi:
        kind = "i" if signed else "u"
        raise NumberOverflowError(
            span=tok.span,
            message=f"{tok.lexeme} does not fit in {kind}{bits}",
            hint=f"values must be within {lo}..{hi}",
            bits=bits,
        )
    return value


class TokenStream:
    """One-token lookahead over a lazy token iterator."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._it: Iterator[Token] = iter(tokens)
        self._cur: Token = next(self._it)
        self.last: Token | None = None

    def at(self, *kinds: TokenKind) -> bool:
        return self._cur.kind in kinds

    def next(self) -> Token:
        tok = self._cur
        if tok.kind is not TokenKind.EOF:
            self._cur = next(self._it)
        self.last = tok
        return tok

    def accept(self, kind: TokenKind, lexeme: str | None = None) -> Token | None:
        if self._cur.kind is kind and (lexeme is None or self._cur.lexeme == lexeme):
            return self.next()
        return None

    def expect(self, kind: TokenKind, lexeme: str | None = None) -> Token:
        tok = self.accept(kind, lexeme)
        if tok is None:
            raise self.error(f"{lexeme!r}" if lexeme is not None else _token_display(kind))
        return tok

    def skip(self, kind: TokenKind) -> int:
        n = 0
        while self.accept(kind) is not None:
            n += 1
        return n

    def expect_eof(self) -> None:
        self.expect(TokenKind.EOF)

    def error(self, *expected: str) -> ParseError:
        tok = self._cur
        found = repr(tok.lexeme) if tok.lexeme.strip() else _token_display(tok.kind)
        hint = None
        if expected:
            hint = f"expected one of: {', '.join(expected)}"
        return ParseError(span=tok.span, message=f"unexpected {found}", hint=hint)

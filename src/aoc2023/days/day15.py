"""Day 15: Lens Library.

Line breaks in the initialization sequence are ignored wherever they appear,
including inside a label or a focal length (``c\\nm`` is the label ``cm``).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..lexer import Lexicon, rule, tokenize
from ..parser import TokenStream, int_value, join_span
from ..spans import Span
from ..tokens import Token, TokenKind


LINE_BREAKS = "\r\n"

LEXICON = Lexicon(
    name="initialization sequence",
    rules=(
        rule(TokenKind.WORD, r"[a-z]+(?:[\r\n]+[a-z]+)*"),
        rule(TokenKind.NUMBER, r"[0-9]+(?:[\r\n]+[0-9]+)*"),
        rule(TokenKind.EQ, r"="),
        rule(TokenKind.DASH, r"-"),
        rule(TokenKind.COMMA, r","),
    ),
    filler=LINE_BREAKS,
)

BOXES = 256


def hash_(text: str) -> int:
    value = 0
    for ch in text:
        value = (value + ord(ch)) * 17 % 256
    return value


def unwrap(text: str) -> str:
    return "".join(ch for ch in text if ch not in LINE_BREAKS)


@dataclass(frozen=True, slots=True)
class Step:
    span: Span
    text: str  # the step as written, line breaks removed
    label: str
    focal_length: int | None  # None removes the lens

    @property
    def box(self) -> int:
        return hash_(self.label)


def _unwrapped(tok: Token) -> Token:
    return Token(tok.kind, unwrap(tok.lexeme), tok.span)


def _step(ts: TokenStream, src: str) -> Step:
    label = _unwrapped(ts.expect(TokenKind.WORD))
    if ts.accept(TokenKind.DASH) is not None:
        focal = None
    elif ts.accept(TokenKind.EQ) is not None:
        focal = int_value(_unwrapped(ts.expect(TokenKind.NUMBER)), bits=8)
    else:
        raise ts.error("=", "-")
    span = join_span(label, ts.last)
    return Step(span=span, text=unwrap(span.slice(src)), label=label.lexeme, focal_length=focal)


def parse(src: str, *, file: str = "<memory>") -> list[Step]:
    ts = TokenStream(tokenize(src, LEXICON, file=file))
    steps = [_step(ts, src)]
    while ts.accept(TokenKind.COMMA) is not None:
        steps.append(_step(ts, src))
    ts.expect_eof()
    return steps


def arrange(steps: list[Step]) -> list[dict[str, int]]:
    """Run the HASHMAP procedure; each box keeps its lenses in slot order."""
    boxes: list[dict[str, int]] = [{} for _ in range(BOXES)]
    for s in steps:
        box = boxes[s.box]
        if s.focal_length is None:
            box.pop(s.label, None)
        else:
            box[s.label] = s.focal_length
    return boxes


def focusing_power(boxes: list[dict[str, int]]) -> int:
    return sum(
        (i + 1) * slot * focal
        for i, box in enumerate(boxes)
        for slot, focal in enumerate(box.values(), start=1)
    )


def part_1(src: str, *, file: str = "<memory>") -> int:
    return sum(hash_(s.text) for s in parse(src, file=file))


def part_2(src: str, *, file: str = "<memory>") -> int:
    return focusing_power(arrange(parse(src, file=file)))

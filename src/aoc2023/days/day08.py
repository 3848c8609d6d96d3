"""Day 8: Haunted Wasteland."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from itertools import cycle
from math import lcm

from ..errors import ParseError
from ..lexer import Lexicon, rule, tokenize
from ..parser import TokenStream
from ..spans import Span
from ..tokens import TokenKind


LEXICON = Lexicon(
    name="desert map",
    rules=(
        rule(TokenKind.WORD, r"[0-9A-Z]+"),
        rule(TokenKind.EQ, r"="),
        rule(TokenKind.LPAREN, r"\("),
        rule(TokenKind.RPAREN, r"\)"),
        rule(TokenKind.COMMA, r","),
    ),
)

START = "AAA"
GOAL = "ZZZ"


@dataclass(frozen=True, slots=True)
class Network:
    span: Span
    instructions: str
    nodes: dict[str, tuple[str, str]]

    def steps(self, start: str, done: Callable[[str], bool]) -> int:
        node = start
        for n, turn in enumerate(cycle(self.instructions)):
            if done(node):
                return n
            left, right = self.nodes[node]
            node = left if turn == "L" else right
        raise AssertionError("unreachable")


def parse(src: str, *, file: str = "<memory>") -> Network:
    ts = TokenStream(tokenize(src, LEXICON, file=file))
    head = ts.expect(TokenKind.WORD)
    if set(head.lexeme) - {"L", "R"}:
        raise ParseError(span=head.span, message=f"bad instructions {head.lexeme!r}", hint="use only L and R")

    nodes: dict[str, tuple[str, str]] = {}
    while not ts.at(TokenKind.EOF):
        name = ts.expect(TokenKind.WORD)
        ts.expect(TokenKind.EQ)
        ts.expect(TokenKind.LPAREN)
        left = ts.expect(TokenKind.WORD).lexeme
        ts.expect(TokenKind.COMMA)
        right = ts.expect(TokenKind.WORD).lexeme
        ts.expect(TokenKind.RPAREN)
        if name.lexeme in nodes:
            raise ParseError(span=name.span, message=f"node {name.lexeme!r} defined twice")
        nodes[name.lexeme] = (left, right)
    ts.expect_eof()

    for left, right in nodes.values():
        for target in (left, right):
            if target not in nodes:
                raise ParseError(span=head.span, message=f"node {target!r} is referenced but never defined")
    return Network(span=head.span, instructions=head.lexeme, nodes=nodes)


def part_1(src: str, *, file: str = "<memory>") -> int:
    net = parse(src, file=file)
    if START not in net.nodes:
        raise ParseError(span=net.span, message=f"no {START} node")
    return net.steps(START, lambda node: node == GOAL)


def part_2(src: str, *, file: str = "<memory>") -> int:
    """Walk every ``..A`` node in step; each ghost cycles back to its ``..Z`` node."""
    net = parse(src, file=file)
    starts = [n for n in net.nodes if n.endswith("A")]
    return lcm(*(net.steps(s, lambda node: node.endswith("Z")) for s in starts))

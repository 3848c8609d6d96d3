"""Day 1: Trebuchet?!

Each line hides a calibration value made of its first and last digit. In part 2
digits may also be spelled out, and spelled digits may share letters
(``eightwo`` is 8 then 2), so recognition has to cope with overlapping matches.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from ..errors import ParseError
from ..spans import Position, Span


WORDS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

DECIMAL = "0123456789"

DigitScanner = Callable[[str], Iterator[int]]


@dataclass(frozen=True, slots=True)
class Line:
    text: str
    span: Span


def lines(src: str, *, file: str = "<memory>") -> Iterator[Line]:
    offset = 0
    for lineno, raw in enumerate(src.splitlines(keepends=True), start=1):
        text = raw.rstrip("\r\n")
        if text.strip():
            start = Position(offset=offset, line=lineno, column=1)
            end = Position(offset=offset + len(text), line=lineno, column=len(text) + 1)
            yield Line(text=text, span=Span(file=file, start=start, end=end))
        offset += len(raw)


def plain_digits(text: str) -> Iterator[int]:
    return (int(ch) for ch in text if ch in DECIMAL)


def window_digits(text: str) -> Iterator[int]:
    """Check every suffix of ``text`` for a leading digit or digit word."""
    for i, ch in enumerate(text):
        if ch in DECIMAL:
            yield int(ch)
            continue
        for word, value in WORDS.items():
            if text.startswith(word, i):
                yield value
                break


# ---------------------------------------------------------------------------
# State machine recognizer
# ---------------------------------------------------------------------------

# A state is the longest suffix of the input so far that is a prefix of some
# digit word. Input classes are the letters used by the words, DIGIT and OTHER.
DIGIT = "<digit>"
OTHER = "<other>"

State = str
Transitions = dict[tuple[State, str], State]

START: State = ""


def _prefixes() -> frozenset[str]:
    return frozenset(w[:i] for w in WORDS for i in range(len(w) + 1))


def _build_transitions() -> Transitions:
    prefixes = _prefixes()
    alphabet = sorted(set("".join(WORDS)))
    table: Transitions = {}
    for state in prefixes:
        for ch in alphabet:
            s = state + ch
            while s not in prefixes:
                s = s[1:]
            table[(state, ch)] = s
        table[(state, DIGIT)] = START
        table[(state, OTHER)] = START
    return table


TRANSITIONS: Transitions = _build_transitions()


def input_class(ch: str) -> str:
    if ch in DECIMAL:
        return DIGIT
    if (START, ch) in TRANSITIONS:
        return ch
    return OTHER


def step(state: State, ch: str) -> tuple[State, int | None]:
    """Pure transition: the next state and the digit completed by ``ch``, if any."""
    cls = input_class(ch)
    nxt = TRANSITIONS[(state, cls)]
    if cls == DIGIT:
        return nxt, int(ch)
    return nxt, WORDS.get(nxt)


@dataclass(frozen=True, slots=True)
class DigitRecognizer:
    """Streams digits and digit words out of a line without backtracking.

    With ``restart`` the machine is reset after every word match and re-fed the
    last character, which is the most two words ever share. Without it the
    machine keeps running from the matched state.
    """

    restart: bool = True

    def __call__(self, text: str) -> Iterator[int]:
        state = START
        for ch in text:
            state, digit = step(state, ch)
            if digit is None:
                continue
            yield digit
            if self.restart and state != START:
                state, _ = step(START, ch)


def calibration_value(line: Line, scan: DigitScanner) -> int:
    digits = list(scan(line.text))
    if not digits:
        raise ParseError(span=line.span, message=f"no digit in line {line.text!r}")
    return 10 * digits[0] + digits[-1]


def total(src: str, scan: DigitScanner, *, file: str = "<memory>") -> int:
    return sum(calibration_value(line, scan) for line in lines(src, file=file))


def part_1(src: str, *, file: str = "<memory>") -> int:
    return total(src, plain_digits, file=file)


def part_2(src: str, *, file: str = "<memory>") -> int:
    return total(src, DigitRecognizer(restart=True), file=file)

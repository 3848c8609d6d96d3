from __future__ import annotations

import argparse
from pathlib import Path

from aoc2023.days import DAYS
from aoc2023.lexer import tokenize


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="dump_tokens")
    ap.add_argument("day", type=int, choices=sorted(d for d, m in DAYS.items() if hasattr(m, "LEXICON")))
    ap.add_argument("input")
    args = ap.parse_args(argv)

    p = Path(args.input).resolve()
    lexicon = DAYS[args.day].LEXICON
    print(f"lexicon: {lexicon.name} ({lexicon.describe()})")
    for tok in tokenize(p.read_text(encoding="utf-8"), lexicon, file=str(p)):
        print(f"{tok.span.start.line:>4}:{tok.span.start.column:<4} {tok.kind.name:<8} {tok.lexeme!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

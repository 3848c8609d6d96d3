from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import available_days, solve_file
from .config import INPUT_DIR_ENV, input_path
from .errors import ParseError


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="aoc2023", description="Solve Advent of Code 2023 puzzles")
    ap.add_argument("day", type=int, choices=available_days(), help="Puzzle day")
    ap.add_argument("--part", type=int, choices=(1, 2), help="Only solve this part")
    ap.add_argument("--input", help="Puzzle input file (default: <input dir>/day_NN.txt)")
    ap.add_argument(
        "--input-dir",
        help=f"Directory with day_NN.txt inputs (default: ${INPUT_DIR_ENV} or ./inputs)",
    )
    ap.add_argument("--json", action="store_true", help="Print answers as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    path = args.input if args.input else input_path(args.day, args.input_dir)
    try:
        answer = solve_file(args.day, path, part=args.part)
    except (ParseError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = {"day": answer.day, **{f"part_{k}": v for k, v in answer.values().items()}}
        print(json.dumps(payload, sort_keys=True))
    else:
        for part, value in answer.values().items():
            print(f"Part {part}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

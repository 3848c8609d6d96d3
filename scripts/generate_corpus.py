from __future__ import annotations

import argparse
from pathlib import Path

from aoc2023.testing import generate_schematics


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=100)
    ap.add_argument("--width", type=int, default=140)
    ap.add_argument("--height", type=int, default=140)
    ap.add_argument("--out", default="tests/fixtures/generated_schematics")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    srcs = generate_schematics(seed=args.seed, count=args.count, width=args.width, height=args.height)
    for i, src in enumerate(srcs):
        (out_dir / f"schematic_{i:06d}.txt").write_text(src, encoding="utf-8")

    print(str(out_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
from pathlib import Path

from linecol.testing import generate_corpus_files, position_table


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="generate_corpus",
        description="Write generated texts with their expected byte-offset position tables",
    )
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=100)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    for rel, text in generate_corpus_files(seed=args.seed, count=args.count):
        case = out_dir / rel
        case.write_bytes(text.encode("utf-8"))
        case.with_suffix(".expected").write_text(position_table(text), encoding="ascii")

    print(str(out_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

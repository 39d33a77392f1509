from __future__ import annotations

import argparse

from linecol.testing import snapshot_digest


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="compute_snapshot_hash")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=200)
    args = ap.parse_args(argv)

    print(snapshot_digest(seed=args.seed, count=args.count))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

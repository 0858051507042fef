"""
scripts/gen_expressions.py

Writes random well-formed expressions, one per line, for batch runs:

    python scripts/gen_expressions.py --n 500 --out data/expressions.txt
    exprtree --file data/expressions.txt
"""

import argparse
import os

from engine.generate import make_expressions

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=100)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--depth", type=int, default=3)
    ap.add_argument("--out", default="data/expressions.txt")
    args = ap.parse_args()

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    exprs = make_expressions(args.n, args.seed, args.depth)
    with open(args.out, "w", encoding="utf-8") as f:
        f.write("\n".join(exprs) + "\n")
    print(f"Saved {len(exprs)} expressions to {args.out}")

"""
Compute the best opening guess for an answer list.

The first branch-and-bound search runs over the untouched list and is by far
the slowest; its result only depends on the list, so it can be computed once
here and passed back to the CLIs with --opening WORD:SCORE.

Usage:
    python -m script.precompute_opener --answers packages/datasets/data/answers_5.txt
"""

import argparse
import logging
import time

from packages.datasets import DEFAULT_ANSWERS_PATH, load_answers
from packages.recommenders import BranchBoundRecommender


def main():
    ap = argparse.ArgumentParser(description="Compute the branch-and-bound opener for a word list.")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS_PATH), help="answer list (one word per line)")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    answers = load_answers(args.answers)
    rec = BranchBoundRecommender(answers)

    t0 = time.time()
    recs = rec.recommend()
    elapsed = time.time() - t0

    if not recs:
        raise SystemExit(f"no words loaded from {args.answers}")
    word, score = recs[0]
    print(f"{len(answers)} words, {elapsed:.1f}s")
    print(f"{word}:{score:.2f}")


if __name__ == "__main__":
    main()

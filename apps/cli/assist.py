# apps/cli/assist.py
"""
Interactive Wordle advisor.

Loop:
  1) Print the current recommendation(s).
  2) Ask which word was played and the colors Wordle showed (G, Y, B).
  3) Feed them to the recommender; repeat until all green or nothing is left.

Bad input (wrong length, unknown color letters, feedback that contradicts
earlier feedback) is reported and asked for again; nothing is recorded.
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import DEFAULT_ANSWERS_PATH, load_answers
from packages.engine import WordleError, parse_feedback, validate_guess
from packages.recommenders import create_recommender, get_recommender_ids, parse_opening


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        print()
        sys.exit(0)


def main():
    ap = argparse.ArgumentParser(description="Wordle advisor: recommends your next guess")
    ap.add_argument("--recommender", default="branch_bound", choices=get_recommender_ids(),
                    help="first_matches: first 5 matches; branch_bound: exhaustive search")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS_PATH),
                    help="path to the answer list (one word per line)")
    ap.add_argument("--opening", metavar="WORD:SCORE",
                    help="precomputed opener for this list (skips the first search)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    answers = load_answers(args.answers)
    known_words = frozenset(answers)

    kwargs = {}
    if args.opening and args.recommender == "branch_bound":
        kwargs.update(skip_first_search=True, opening=parse_opening(args.opening))
    recommender = create_recommender(args.recommender, answers, **kwargs)

    print(f"{recommender.name}: {len(answers)} candidate words.")

    while True:
        recommendations = recommender.recommend()

        print()
        for word, score in recommendations:
            print(f"recommendation: {word}    score: {score:.3f}")

        if not recommendations:
            print("No word in the list fits the feedback so far.")
            return

        # Wordle feedback; re-ask until it is accepted
        print()
        while True:
            word = _ask("Enter word: ").strip().lower()
            colors = _ask("Enter colors (G, Y, B): ")
            try:
                feedback = parse_feedback(word, colors)
                if feedback.is_solved:
                    print("Solved!")
                    return
                recommender.add_knowledge(word, feedback)
            except WordleError as e:
                print(f"error: {e}")
                continue
            if not validate_guess(word, known_words):
                print(f"note: '{word}' is not in the answer list")
            break


if __name__ == "__main__":
    main()

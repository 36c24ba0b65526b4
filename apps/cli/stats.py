# apps/cli/stats.py
"""
CLI entry point for measuring a recommender over the whole answer list.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Instantiates the requested recommender.
  3) Plays every answer (or a seeded sample) with a live progress indicator,
     prints the guesses histogram, and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word list report, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import DEFAULT_ANSWERS_PATH, load_answers, pretty_summary, validate_wordlist
from packages.harness import format_statistics, run_case, summarize
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from packages.recommenders import create_recommender, get_recommender_ids, parse_opening


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def main():
    """
    Parse CLI args, validate the list, run every case with progress, report and write outputs.
    """
    ap = argparse.ArgumentParser(description="Wordle advisor: simulate a recommender over all answers")
    ap.add_argument("--recommender", default="branch_bound", choices=get_recommender_ids(),
                    help="recommender id")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS_PATH),
                    help="path to the answer list (one word per line)")
    ap.add_argument("--first-guess",
                    help="fixed opening word (default: ask the recommender)")
    ap.add_argument("--opening", metavar="WORD:SCORE",
                    help="precomputed opener for this list (see script/precompute_opener.py); "
                         "skips the first, slowest search")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate and load the list
    rep = validate_wordlist(args.answers)
    print(pretty_summary(rep))
    if not rep["exists"]:
        sys.exit(f"word list not found: {args.answers}")
    answers = load_answers(args.answers)

    # 2) Recommender; an opener is only valid for the list it was computed on
    kwargs = {}
    if args.opening and args.recommender == "branch_bound":
        kwargs.update(skip_first_search=True, opening=parse_opening(args.opening))
    recommender = create_recommender(args.recommender, answers, **kwargs)

    # 3) Cases
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(answers)
    total = len(cases)

    mode = _progress_mode(args.progress)
    iterator = tqdm(cases, ncols=80, desc="Simulating", unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0

    for idx, ans in enumerate(iterator, 1):
        r = run_case(recommender, ans, first_guess=args.first_guess)
        r["recommender_id"] = recommender.id
        results.append(r)
        if not r["success"]:
            print(f"Failed to guess the word {ans}.", file=sys.stderr)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 4) Report
    summary = summarize(results)
    print()
    print(format_statistics(summary))

    # 5) Outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"stats_{run_id}.csv"
    manifest_path = outdir / f"stats_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "recommender_id": recommender.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

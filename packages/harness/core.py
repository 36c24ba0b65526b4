"""
Simulation harness primitives.

- run_case:  play one puzzle (one hidden answer) with a given recommender.
- run_batch: play many puzzles back to back, optionally with a progress hook.
- summarize / format_statistics: min/avg/max guesses, failures, histogram.

A game ends when the top recommendation is the answer, or when the
recommender has nothing left to recommend (a failure). There is no hard turn
cap here; `within_limit` records whether the solve fit Wordle's six turns.

These functions are UI-agnostic so the stats CLI, tests, and the opener
precompute script can share them.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from packages.engine import simulate

logger = logging.getLogger(__name__)

# Wordle's turn budget, used for reporting only.
WORDLE_MAX_TURNS = 6


def run_case(recommender, answer: str, *, first_guess: Optional[str] = None) -> Dict:
    """
    Play one game until the answer is guessed or recommendations run out.

    Args:
        recommender: a BaseRecommender (reset here before play)
        answer:      the hidden word for this case
        first_guess: fixed opening word; None means ask the recommender

    Returns:
        dict with keys:
            answer, success (bool), guesses (int), within_limit (bool),
            time_ms (float, time spent inside recommend()),
            history (list[(guess, pattern)])
    """
    recommender.reset()
    history: List[Tuple[str, str]] = []
    total_ms = 0.0
    success = False

    guess = first_guess
    while True:
        if guess is None:
            t0 = time.perf_counter_ns()
            recs = recommender.recommend()
            total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0
            if not recs:
                logger.warning("no recommendation left for answer %r after %s", answer, history)
                break
            guess = recs[0].word

        fb = simulate(guess, answer)
        history.append((guess, fb.pattern))
        if fb.is_solved:
            success = True
            break

        recommender.add_knowledge(guess, fb)
        guess = None

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "within_limit": success and len(history) <= WORDLE_MAX_TURNS,
        "time_ms": total_ms,
        "history": history,
    }


def run_batch(
        recommender,
        answers: Sequence[str],
        *,
        first_guess: Optional[str] = None,
        sample: Optional[int] = None,
        progress: Optional[Callable[[int, int], None]] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is given only the first K answers
    are played. `progress(done, total)` is called after every case.
    """
    cases = list(answers)
    if sample is not None:
        cases = cases[:sample]

    out: List[Dict] = []
    total = len(cases)
    for idx, ans in enumerate(cases, start=1):
        r = run_case(recommender, ans, first_guess=first_guess)
        r["recommender_id"] = recommender.id
        out.append(r)
        if progress is not None:
            progress(idx, total)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate per-game results.

    Returns:
        dict with keys: games, failures, over_limit, min, max, mean,
        histogram (list of (guesses, frequency) from min to max).
        min/max/mean are None when no game was solved.
    """
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    failures = len(results) - len(solved)
    summary: Dict = {
        "games": len(results),
        "failures": failures,
        "over_limit": int((solved > WORDLE_MAX_TURNS).sum()),
        "min": None,
        "max": None,
        "mean": None,
        "histogram": [],
    }
    if solved.size == 0:
        return summary

    lo, hi = int(solved.min()), int(solved.max())
    counts = np.bincount(solved, minlength=hi + 1)[lo:]
    summary.update(
        min=lo,
        max=hi,
        mean=float(solved.mean()),
        histogram=[(lo + i, int(c)) for i, c in enumerate(counts)],
    )
    return summary


def format_statistics(summary: Dict) -> str:
    """Render a summary as the console report (header, min/avg/max, histogram)."""
    lines = [f"Simulation completed. There has been {summary['failures']} failures.", ""]
    if summary["mean"] is None:
        return "\n".join(lines)

    lines += [
        f"Max guesses:     {summary['max']}",
        f"Average guesses: {summary['mean']:.3g}",
        f"Min guesses:     {summary['min']}",
        "",
        "# Guesses".ljust(12) + "Frequency",
    ]
    lines += [str(n).ljust(12) + str(c) for n, c in summary["histogram"]]
    lines.append("Total: ".rjust(12) + str(sum(c for _, c in summary["histogram"])))
    return "\n".join(lines)

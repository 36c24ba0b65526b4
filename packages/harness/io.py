"""
Output files for a batch of simulated games.

One CSV row per played answer (which recommender, how many guesses, the
guess/pattern pairs in order) and one JSON manifest per run tying the rows to
the word list, the CLI flags and the commit they came from.

Pattern cells start with an apostrophe so a spreadsheet keeps "GYBBB" as text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _as_text_cell(pattern: str) -> str:
    return "'" + pattern if pattern else pattern


def write_csv(results: List[Dict], path: str) -> str:
    """
    Write one row per game from run_case/run_batch results and return the path.

    Columns: recommender, answer, success, guesses, within_limit, time_ms,
    then guess_1, patt_1 ... guess_K, patt_K for the longest game K.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = max((len(r.get("history", [])) for r in results), default=0)
    turn_fields = [name for t in range(1, turns + 1) for name in (f"guess_{t}", f"patt_{t}")]
    fields = ["recommender", "answer", "success", "guesses", "within_limit", "time_ms"] + turn_fields

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields, restval="")
        w.writeheader()
        for r in results:
            row = {
                "recommender": r.get("recommender_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "within_limit": r.get("within_limit", ""),
                "time_ms": round(float(r["time_ms"]), 3),
            }
            # shorter games leave their trailing turn columns blank
            for t, (guess, pattern) in enumerate(r.get("history", []), 1):
                row[f"guess_{t}"] = guess
                row[f"patt_{t}"] = _as_text_cell(pattern)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump the run manifest (run_id, git_commit, config, wordlist report,
    recommender_id, summary) as indented JSON and return the path.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """UTC run id used in output file names, e.g. 20261017T093000Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short HEAD hash recorded in the manifest; 'unknown' outside a git checkout."""
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

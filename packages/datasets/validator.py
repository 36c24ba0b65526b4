"""
Reference word list validator.

What this module does:
- Validate the answer list the advisor searches over (answers_5.txt).
- Enforce formatting rules (lowercase, a–z only, exactly 5 letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/answers_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import WORD_LENGTH


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exactly WORD_LENGTH letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.islower() and w.isalpha() and len(w) == WORD_LENGTH:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str) -> Dict:
    """
    Validate a reference word list.

    Returns a JSON-serializable dict (WordlistReport schema). `passed` is
    strict: the file must exist, be non-empty, and have no invalid or
    duplicate lines. `issues` lists every problem found.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path, False, 0, "", 0, 0,
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if rep.count == 0:
        rep.issues.append("word list contains 0 valid words")
    if invalid:
        rep.issues.append(f"word list has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("word list contains duplicate lines")

    rep.passed = not rep.issues
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        answers=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"answers={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )

"""
Lightweight guess validation.

A guess is acceptable iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exactly WORD_LENGTH letters
  - it exists in the provided `allowed` list/set

The interactive CLI uses this to warn about words the advisor has never heard
of; the engine itself accepts any well-formed word.
"""

from typing import Iterable, Set

from .scoring import WORD_LENGTH


def validate_guess(word: str, allowed: Iterable[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - A set/frozenset `allowed` is used as-is; any other iterable is turned
        into a set here, so precompute one if you call this in a loop.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    if len(w) != WORD_LENGTH or not w.isalpha():
        return False

    if isinstance(allowed, (set, frozenset)):
        return w in allowed
    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set

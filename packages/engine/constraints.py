"""
Accumulated knowledge from feedback, and candidate filtering against it.

Three kinds of rule are tracked:
  - fixed_letters[i]    : the letter known to sit at position i (green)
  - excluded_letters[i] : letters known NOT to sit at position i (yellow + grey)
  - required_letters    : letters that must occur somewhere among the
                          positions that are not fixed yet (yellow)

A (word, colors) submission is a transaction: every position is validated
against the current state first, and only then are all rules applied.
If any rule conflicts, nothing changes.

Known limitation: a grey mark on a letter that appears more than once in the
guess is only checked against the fixed letter at its own index. Other
repeated-letter contradictions are accepted.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from .errors import ConflictError, LengthMismatch
from .scoring import WORD_LENGTH, Color, ColorsLike, as_colors


class Knowledge:
    __slots__ = ("fixed_letters", "excluded_letters", "required_letters")

    def __init__(self):
        self.fixed_letters: List[Optional[str]] = [None] * WORD_LENGTH
        self.excluded_letters: List[Set[str]] = [set() for _ in range(WORD_LENGTH)]
        self.required_letters: Set[str] = set()

    def clone(self) -> "Knowledge":
        """Independent deep copy. Called once per (guess, answer) pair in the search."""
        k = Knowledge.__new__(Knowledge)
        k.fixed_letters = list(self.fixed_letters)
        k.excluded_letters = [set(s) for s in self.excluded_letters]
        k.required_letters = set(self.required_letters)
        return k

    @property
    def is_empty(self) -> bool:
        return (
            not self.required_letters
            and all(f is None for f in self.fixed_letters)
            and not any(self.excluded_letters)
        )

    # ---- adding rules ----

    def add(self, word: str, colors: ColorsLike) -> None:
        """
        Validate then apply the feedback `colors` for guess `word`.

        Raises:
          LengthMismatch : word or colors is not WORD_LENGTH long
          ConflictError  : a rule contradicts the current knowledge
        """
        word = word.lower()
        if len(word) != WORD_LENGTH:
            raise LengthMismatch("guess", WORD_LENGTH, len(word))
        colors = as_colors(word, colors)
        if len(colors) != WORD_LENGTH:
            raise LengthMismatch("feedback", WORD_LENGTH, len(colors))

        for i in range(WORD_LENGTH):
            self._check_rule(word, colors, i)

        # Order matters: grey may override what yellow just inferred
        self._apply_correct(word, colors)
        self._apply_present(word, colors)
        self._apply_absent(word, colors)

    def _check_rule(self, word: str, colors, index: int) -> None:
        c = word[index]
        color = colors[index]
        fixed = self.fixed_letters

        if color is Color.CORRECT:
            if fixed[index] is not None and fixed[index] != c:
                raise ConflictError(word, index, c, color,
                                    f"The letter at index {index} is already known to be '{fixed[index]}'.")
            if c in self.excluded_letters[index]:
                raise ConflictError(word, index, c, color,
                                    f"'{c}' is already known to be impossible at index {index}.")

        elif color is Color.PRESENT:
            if fixed[index] == c:
                raise ConflictError(word, index, c, color,
                                    f"The letter at index {index} is already known to be '{c}'.")
            # Some unfixed position must still be able to hold c
            if not any(fixed[i] is None and c not in self.excluded_letters[i]
                       for i in range(WORD_LENGTH)):
                raise ConflictError(word, index, c, color,
                                    f"'{c}' is impossible in every remaining unknown position.")

        elif color is Color.ABSENT:
            if word.count(c) <= 1:
                if c in fixed:
                    raise ConflictError(word, index, c, color,
                                        f"'{c}' conflicts with a known letter.")
            elif fixed[index] == c:
                # repeat letter: only the own index is checked
                raise ConflictError(word, index, c, color,
                                    f"'{c}' conflicts with the known letter at index {index}.")

    def _apply_correct(self, word: str, colors) -> None:
        for i, color in enumerate(colors):
            if color is Color.CORRECT:
                self.fixed_letters[i] = word[i]
                self.required_letters.discard(word[i])

    def _apply_present(self, word: str, colors) -> None:
        for i, color in enumerate(colors):
            if color is Color.PRESENT:
                self.excluded_letters[i].add(word[i])
                self.required_letters.add(word[i])

    def _apply_absent(self, word: str, colors) -> None:
        for i, color in enumerate(colors):
            if color is not Color.ABSENT:
                continue
            c = word[i]
            if word.index(c) == i:
                # first occurrence: c is absent everywhere it isn't fixed
                for j in range(WORD_LENGTH):
                    if self.fixed_letters[j] != c:
                        self.excluded_letters[j].add(c)
                self.required_letters.discard(c)
            else:
                # repeat occurrence: only this index is ruled out
                self.excluded_letters[i].add(c)

    # ---- querying ----

    def check(self, word: str) -> bool:
        """True if `word` satisfies every rule accumulated so far."""
        if len(word) != WORD_LENGTH:
            return False

        fixed = self.fixed_letters
        excluded = self.excluded_letters
        for i in range(WORD_LENGTH):
            ch = word[i]
            f = fixed[i]
            if f is not None and f != ch:
                return False
            if ch in excluded[i]:
                return False

        if self.required_letters:
            open_letters = {word[i] for i in range(WORD_LENGTH) if fixed[i] is None}
            if not self.required_letters <= open_letters:
                return False
        return True

    def count_pass(self, words: Iterable[str]) -> int:
        """Number of `words` that pass check()."""
        _check = self.check
        return sum(1 for w in words if _check(w))

    def __repr__(self) -> str:
        fixed = "".join(f or "." for f in self.fixed_letters)
        return (f"Knowledge(fixed={fixed!r}, "
                f"excluded={[''.join(sorted(s)) for s in self.excluded_letters]}, "
                f"required={''.join(sorted(self.required_letters))!r})")


def filter_candidates(words: Iterable[str], knowledge: Knowledge) -> List[str]:
    """
    Keep only the words consistent with `knowledge` (order preserved).

    Words are normalized (stripped, lowercased); anything that isn't a clean
    alphabetic token is skipped.
    """
    out: List[str] = []
    for w in words:
        w = w.strip().lower()
        if not w.isalpha():
            continue
        if knowledge.check(w):
            out.append(w)
    return out

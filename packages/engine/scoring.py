"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions (interchange alphabet):
  - 'G' : Color.CORRECT = correct letter in the correct position
  - 'Y' : Color.PRESENT = correct letter in the wrong position
  - 'B' : Color.ABSENT  = letter not present (or present fewer times than guessed)

Algorithm (optimistic, then downgrade):
  1) Every position starts as PRESENT.
  2) Exact matches become CORRECT.
  3) Letters that never occur in the answer become ABSENT.
  4) Duplicate resolution: CORRECT positions consume their answer slot. Then,
     left to right, each remaining PRESENT must consume one unconsumed
     occurrence of its letter in the answer, otherwise it drops to ABSENT.
     Earlier guess positions win over later ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence, Tuple, Union

from .errors import InvalidFeedbackSymbol, LengthMismatch

# Fixed puzzle width; other lengths are not supported.
WORD_LENGTH = 5


class Color(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "B"


_SYMBOLS = {c.value: c for c in Color}


@dataclass(frozen=True)
class Feedback:
    """Per-position colors paired with the guess that produced them."""
    guess: str
    colors: Tuple[Color, ...]

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, i: int) -> Color:
        return self.colors[i]

    @property
    def pattern(self) -> str:
        return "".join(c.value for c in self.colors)

    @property
    def is_solved(self) -> bool:
        return all(c is Color.CORRECT for c in self.colors)


ColorsLike = Union[Feedback, Sequence[Color], str]


def simulate(guess: str, answer: str) -> Feedback:
    """
    Compute the feedback Wordle would show for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      simulate("trust", "pleat").pattern -> "BBBBG"
      simulate("abyss", "abbey").pattern -> "GGYBB"
    """
    guess = guess.lower()
    answer = answer.lower()
    n = len(guess)

    colors = [Color.PRESENT] * n
    consumed = [False] * n

    for i in range(n):
        if guess[i] == answer[i]:
            colors[i] = Color.CORRECT
            consumed[i] = True
        elif guess[i] not in answer:
            colors[i] = Color.ABSENT

    # Each PRESENT needs its own unconsumed occurrence in the answer
    for i in range(n):
        if colors[i] is not Color.PRESENT:
            continue
        c = guess[i]
        for j in range(n):
            if answer[j] == c and not consumed[j]:
                consumed[j] = True
                break
        else:
            colors[i] = Color.ABSENT

    return Feedback(guess, tuple(colors))


def score(guess: str, answer: str) -> str:
    """Same as simulate(), rendered as a G/Y/B string."""
    return simulate(guess, answer).pattern


def parse_feedback(guess: str, text: str) -> Feedback:
    """
    Turn a user-typed color string (e.g. "gybbb") into a Feedback for `guess`.

    Raises:
      LengthMismatch        : guess or text is not WORD_LENGTH long
      InvalidFeedbackSymbol : a character other than G/Y/B (any case)
    """
    guess = guess.strip().lower()
    text = text.strip()
    if len(guess) != WORD_LENGTH:
        raise LengthMismatch("guess", WORD_LENGTH, len(guess))
    if len(text) != WORD_LENGTH:
        raise LengthMismatch("feedback", WORD_LENGTH, len(text))

    colors = []
    for i, ch in enumerate(text.upper()):
        try:
            colors.append(_SYMBOLS[ch])
        except KeyError:
            raise InvalidFeedbackSymbol(text, i, text[i]) from None
    return Feedback(guess, tuple(colors))


def format_feedback(feedback: ColorsLike) -> str:
    if isinstance(feedback, str):
        return feedback.upper()
    return "".join(c.value for c in feedback)


def as_colors(word: str, colors: ColorsLike) -> Tuple[Color, ...]:
    """
    Normalize any accepted colors representation to a tuple of Color.

    Sequence elements may be Color members or their G/Y/B symbols (any case);
    anything else raises InvalidFeedbackSymbol.
    """
    if isinstance(colors, Feedback):
        return colors.colors
    if isinstance(colors, str):
        return parse_feedback(word, colors).colors

    out = []
    for i, c in enumerate(colors):
        if not isinstance(c, Color):
            c = _SYMBOLS.get(str(c).strip().upper())
            if c is None:
                text = "".join(getattr(x, "value", str(x)) for x in colors)
                raise InvalidFeedbackSymbol(text, i, colors[i])
        out.append(c)
    return tuple(out)

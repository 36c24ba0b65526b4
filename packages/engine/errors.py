"""
Typed errors raised by the engine.

All of them derive from ValueError so callers that only care about
"bad input" can catch one thing. Each carries the fields needed to build a
diagnostic message (position, letter, rule kind).
"""

from __future__ import annotations


class WordleError(ValueError):
    """Base class for engine errors."""


class LengthMismatch(WordleError):
    """A guess or a feedback string does not have the fixed word length."""

    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} length is {actual}, expected {expected}")


class ConflictError(WordleError):
    """A feedback rule contradicts the knowledge accumulated so far."""

    def __init__(self, word: str, index: int, letter: str, color, reason: str):
        self.word = word
        self.index = index
        self.letter = letter
        self.color = color
        self.reason = reason
        super().__init__(
            f"Failed to add '{word}': '{letter}' {color.name} at index {index}. {reason}"
        )


class InvalidFeedbackSymbol(WordleError):
    """A feedback string contains something other than G, Y or B."""

    def __init__(self, text: str, index: int, symbol: str):
        self.text = text
        self.index = index
        self.symbol = symbol
        super().__init__(
            f"The color string '{text}' can only contain 'G', 'Y', or 'B' "
            f"(got {symbol!r} at index {index})"
        )

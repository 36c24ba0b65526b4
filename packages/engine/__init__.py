from .errors import WordleError, LengthMismatch, ConflictError, InvalidFeedbackSymbol
from .scoring import (WORD_LENGTH, Color, ColorsLike, Feedback, simulate, score, parse_feedback,
                      format_feedback)
from .constraints import Knowledge, filter_candidates
from .validation import validate_guess

__all__ = [
    "WORD_LENGTH", "Color", "ColorsLike", "Feedback", "simulate", "score", "parse_feedback",
    "format_feedback", "Knowledge", "filter_candidates", "validate_guess",
    "WordleError", "LengthMismatch", "ConflictError", "InvalidFeedbackSymbol",
]

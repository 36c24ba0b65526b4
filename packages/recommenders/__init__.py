from __future__ import annotations
from typing import Iterable, List, Optional

from packages.datasets import load_answers
from .base import BaseRecommender, Recommendation, REGISTRY, register
from .pool import CandidatePool

from . import first_matches  # noqa: F401
from . import branch_bound  # noqa: F401

from .first_matches import FirstMatchesRecommender
from .branch_bound import BranchBoundRecommender


def create_recommender(recommender_id: str, words: Optional[Iterable[str]] = None,
                       **kwargs) -> BaseRecommender:
    """
    Factory: instantiate a registered recommender by id.

    `words` defaults to the packaged answer list; extra keyword arguments go
    to the recommender's constructor (e.g. skip_first_search=True).
    """
    try:
        cls = REGISTRY[recommender_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown recommender id: {recommender_id}. Available: {sorted(REGISTRY.keys())}") from e
    if words is None:
        words = load_answers()
    return cls(words, **kwargs)


def get_recommender_ids() -> List[str]:
    """
    Return all registered recommender ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


def parse_opening(text: str) -> Recommendation:
    """
    Parse a "word:score" opener as printed by script/precompute_opener.py.
    Raises ValueError on anything else.
    """
    word, sep, score = text.partition(":")
    word = word.strip().lower()
    if not sep or not word.isalpha():
        raise ValueError(f"opening must look like WORD:SCORE, got {text!r}")
    return Recommendation(word, float(score))


__all__ = ["BaseRecommender", "Recommendation", "CandidatePool", "REGISTRY", "register",
           "FirstMatchesRecommender", "BranchBoundRecommender", "create_recommender",
           "get_recommender_ids", "parse_opening"]

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, NamedTuple, Type

from packages.engine import ColorsLike, Knowledge, format_feedback
from .pool import CandidatePool

logger = logging.getLogger(__name__)

# ---- Global recommender registry ----
REGISTRY: Dict[str, Type["BaseRecommender"]] = {}


def register(cls: Type["BaseRecommender"]) -> Type["BaseRecommender"]:
    """
    Decorator: @register on a recommender class adds it to REGISTRY by its `id`.
    """
    rid = getattr(cls, "id", None)
    if not rid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if rid in REGISTRY:
        raise ValueError(f"Duplicate recommender id: {rid}")
    REGISTRY[rid] = cls
    return cls


class Recommendation(NamedTuple):
    word: str
    score: float


# ---- Base class that recommenders inherit ----
class BaseRecommender:
    """
    Owns a candidate pool and the knowledge gathered in the current puzzle.

    Capabilities: add_knowledge(), recommend(), reset().
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, words: Iterable[str]):
        self.pool = CandidatePool(words)
        self.knowledge = Knowledge()

    def reset(self) -> None:
        """Start a new puzzle: every word is a candidate again, no knowledge."""
        self.pool.reset()
        self.knowledge = Knowledge()

    def add_knowledge(self, word: str, colors: ColorsLike) -> None:
        """Record feedback; raises ConflictError/LengthMismatch without changing state."""
        self.knowledge.add(word, colors)
        logger.debug("%s: added %s %s -> %r", self.id, word, format_feedback(colors), self.knowledge)

    def recommend(self) -> List[Recommendation]:
        raise NotImplementedError("Override in subclass")

"""
First Matches recommender (baseline).

Strategy:
  - Drop every pool word that no longer fits the knowledge.
  - Recommend the first MAX_RESULTS survivors in list order, all with the same
    score. This is what a person scanning the word list would do.
"""

from __future__ import annotations

from typing import List

from .base import BaseRecommender, Recommendation, register


@register
class FirstMatchesRecommender(BaseRecommender):
    id = "first_matches"
    name = "First Matches"
    version = "1.0.0"

    MAX_RESULTS = 5
    SCORE = 1.0

    def recommend(self) -> List[Recommendation]:
        self.pool.refilter(self.knowledge)
        return [Recommendation(w, self.SCORE)
                for w in self.pool.survivors()[: self.MAX_RESULTS]]

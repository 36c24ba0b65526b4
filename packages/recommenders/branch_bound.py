"""
Exhaustive Search recommender with branch-and-bound pruning.

Idea:
  Treat every surviving candidate g as the next guess. For each other
  survivor a taken as the hidden answer, simulate the feedback for (g, a),
  apply it to a copy of the knowledge, and count how many survivors would
  still pass. The sum over all answers is g's pass count; the guess with the
  smallest sum leaves the fewest words on average.

Cost:
  n guesses x (n - 1) answers x n checks = O(n^3). Guesses are visited in
  list order and the running minimum is used as a bound: as soon as a guess's
  partial sum exceeds it, the guess cannot win and the rest of its answers
  are skipped.

Opening:
  The first recommendation for an untouched pool is the most expensive one
  and never changes for a given list, so it can be precomputed offline
  (see script/precompute_opener.py) and returned directly.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from packages.engine import simulate
from .base import BaseRecommender, Recommendation, register

logger = logging.getLogger(__name__)


@register
class BranchBoundRecommender(BaseRecommender):
    id = "branch_bound"
    name = "Exhaustive Search (branch and bound)"
    version = "2.0.0"

    # Precomputed for the official 2315-word answer list
    OPENING = Recommendation("raise", 61.03)

    def __init__(self, words: Iterable[str], *, skip_first_search: bool = False,
                 opening: Optional[Tuple[str, float]] = None):
        super().__init__(words)
        self.skip_first_search = skip_first_search
        self.opening = Recommendation(*opening) if opening is not None else self.OPENING

    def pass_count_one(self, guess: str, answer: str,
                       candidates: Optional[Sequence[str]] = None) -> int:
        """
        Number of candidates that would still pass if `guess` were played
        against hidden `answer`.
        """
        if candidates is None:
            candidates = self.pool.survivors()
        k = self.knowledge.clone()
        k.add(guess, simulate(guess, answer))
        return k.count_pass(candidates)

    def pass_count_below(self, guess_index: int, bound: float,
                         survivors: Optional[List[Tuple[int, str]]] = None) -> Tuple[bool, int]:
        """
        Sum pass_count_one() over every other survivor as the answer, giving up
        as soon as the sum exceeds `bound`.

        Returns:
          (valid, pass_count) where valid is False if counting stopped early;
          in that case pass_count is only a partial sum.
        """
        if survivors is None:
            survivors = self.pool.indexed_survivors()
        words = [w for _, w in survivors]
        guess = self.pool.words[guess_index]

        total = 0
        for i, answer in survivors:
            if i == guess_index:
                continue
            total += self.pass_count_one(guess, answer, words)
            if total > bound:
                return False, total
        return True, total

    def recommend(self) -> List[Recommendation]:
        """Top recommendation only, scored by the mean remaining count."""
        count = self.pool.refilter(self.knowledge)
        if count == 0:
            return []

        if (self.skip_first_search and self.knowledge.is_empty
                and count == self.pool.original_size):
            return [self.opening]

        survivors = self.pool.indexed_survivors()
        best_so_far = math.inf
        ranked: List[Tuple[str, int]] = []
        pruned = 0

        for i, guess in survivors:
            valid, total = self.pass_count_below(i, best_so_far, survivors)
            if valid:
                best_so_far = total
                ranked.append((guess, total))
                logger.debug("new bound %d from %s", total, guess)
            else:
                pruned += 1

        # stable: equal counts keep list order
        ranked.sort(key=lambda r: r[1])
        guess, total = ranked[0]

        # One survivor is the guess itself; the other count - 1 are the answers
        score = total / (count - 1) if count > 1 else float(total)
        logger.info("%d candidates, best %s (%.3f), %d guesses pruned",
                    count, guess, score, pruned)
        return [Recommendation(guess, score)]

    def recommend_full(self) -> List[Recommendation]:
        """
        Unbounded version of recommend(): score every survivor by its mean
        remaining count and return them all, best first. Much slower; kept
        as the reference the pruned search is checked against.
        """
        self.pool.refilter(self.knowledge)
        survivors = self.pool.indexed_survivors()
        words = [w for _, w in survivors]

        out: List[Recommendation] = []
        for i, guess in survivors:
            answers = [w for j, w in survivors if j != i]
            total = sum(self.pass_count_one(guess, a, words) for a in answers)
            out.append(Recommendation(guess, total / len(answers) if answers else 0.0))

        out.sort(key=lambda r: r.score)
        return out

"""
Candidate pool: the reference words plus an "alive" mask.

Eliminated words are never removed; their mask bit is cleared instead, so
indices into the original list stay valid and nothing is reallocated.
`reset()` brings every word back.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

import numpy as np

from packages.engine import Knowledge


class CandidatePool:
    def __init__(self, words: Iterable[str]):
        self.words: Tuple[str, ...] = tuple(words)
        self.alive = np.ones(len(self.words), dtype=bool)

    @property
    def original_size(self) -> int:
        return len(self.words)

    @property
    def alive_count(self) -> int:
        return int(self.alive.sum())

    def __len__(self) -> int:
        return self.alive_count

    def __iter__(self) -> Iterator[str]:
        return iter(self.survivors())

    def is_alive(self, i: int) -> bool:
        return bool(self.alive[i])

    def eliminate(self, i: int) -> None:
        self.alive[i] = False

    def reset(self) -> None:
        self.alive[:] = True

    def indexed_survivors(self) -> List[Tuple[int, str]]:
        """(index, word) for every alive entry, in pool order."""
        words = self.words
        return [(int(i), words[i]) for i in np.flatnonzero(self.alive)]

    def survivors(self) -> List[str]:
        return [w for _, w in self.indexed_survivors()]

    def refilter(self, knowledge: Knowledge) -> int:
        """Eliminate every alive word that fails `knowledge`; return the survivor count."""
        count = 0
        for i, w in self.indexed_survivors():
            if knowledge.check(w):
                count += 1
            else:
                self.alive[i] = False
        return count

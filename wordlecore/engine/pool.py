"""
Candidate pool: the dictionary words (with frequency weights) that are still
consistent with everything observed in the current game.

One pool per game. It starts as a copy of the full dictionary and only ever
shrinks; the shared dictionary mapping itself is never touched.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Tuple

from .constraints import is_consistent
from .correctness import Guess, check_word


class CandidatePool:

    def __init__(self, dictionary: Mapping[str, int]):
        weights: Dict[str, int] = {}
        for w, f in dictionary.items():
            check_word(w)
            if f < 0:
                raise ValueError(f"negative weight for {w!r}: {f}")
            weights[w] = int(f)
        self._weights = weights

    def prune(self, prior: Guess) -> int:
        """
        Drop every entry that `prior` rules out. Returns how many were removed.
        """
        before = len(self._weights)
        self._weights = {w: f for w, f in self._weights.items() if is_consistent(prior, w)}
        return before - len(self._weights)

    def entries(self) -> List[Tuple[str, int]]:
        """Surviving (word, weight) pairs, in dictionary order."""
        return list(self._weights.items())

    def words(self) -> List[str]:
        return list(self._weights)

    def weight(self, word: str) -> int:
        return self._weights[word]

    def __len__(self) -> int:
        return len(self._weights)

    def __contains__(self, word) -> bool:
        return word in self._weights

    def __repr__(self) -> str:
        return f"CandidatePool({len(self)} candidates)"

"""
Entropy Solver (expected information gain, frequency-weighted).

Main idea:
  - For each candidate guess g, partition the CURRENT candidates by the mask
    g would produce against each of them.
  - Bucket probabilities use the candidates' dictionary weights (add-one
    smoothed, so zero-frequency words still count):
        p(bucket) = sum_{a in bucket} w(a) / sum_{a in pool} w(a)
  - Goodness = (Shannon entropy H in bits, weight); pick the max.

Acceleration:
  - When the pool is large, only the top SHORTLIST_CAP candidates by weight
    are evaluated, both as guesses and as the answers being partitioned.
    The quadratic scoring loop stays bounded on full-size dictionaries.
"""

from __future__ import annotations
from typing import List, Tuple

import numpy as np

from wordlecore.engine import WORD_LENGTH, Correctness, Mask, score
from .base import RankedSolver, register

_TRIT = {Correctness.ABSENT: 0, Correctness.MISPLACED: 1, Correctness.CORRECT: 2}
_NUM_MASKS = 3 ** WORD_LENGTH


def mask_code(mask: Mask) -> int:
    """Pack a mask into a base-3 integer in [0, 3**WORD_LENGTH)."""
    code = 0
    for c in mask:
        code = code * 3 + _TRIT[c]
    return code


def weighted_entropy(guess: str, answers: List[str], weights: np.ndarray) -> float:
    """Entropy (bits) of the mask distribution `guess` induces over `answers`."""
    if len(answers) <= 1:
        return 0.0
    codes = np.fromiter((mask_code(score(a, guess)) for a in answers),
                        dtype=np.int64, count=len(answers))
    buckets = np.bincount(codes, weights=weights, minlength=_NUM_MASKS)
    total = buckets.sum()
    if total <= 0:
        return 0.0
    p = buckets[buckets > 0] / total
    return float(-(p * np.log2(p)).sum())


@register
class EntropySolver(RankedSolver):
    id = "entropy"
    name = "Entropy (Weighted Information Gain)"
    version = "1.0.0"

    SHORTLIST_CAP = 300

    def __init__(self):
        super().__init__()
        self._answers: List[str] = []
        self._weights = np.zeros(0)

    def goodness(self, word: str, weight: int) -> Tuple[float, int]:
        return weighted_entropy(word, self._answers, self._weights), weight

    def _shortlist(self, entries: List[Tuple[str, int]]) -> List[Tuple[str, int]]:
        if len(entries) <= self.SHORTLIST_CAP:
            return entries
        return sorted(entries, key=lambda e: (-e[1], e[0]))[: self.SHORTLIST_CAP]

    def choose(self, entries: List[Tuple[str, int]]) -> str:
        shortlist = self._shortlist(entries)
        self._answers = [w for w, _ in shortlist]
        self._weights = np.array([f for _, f in shortlist], dtype=np.float64) + 1.0
        return super().choose(shortlist)

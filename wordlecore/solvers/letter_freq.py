"""
Letter-Frequency Solver (distinct-letter coverage).

Idea:
  - Build a letter histogram over the CURRENT candidate pool (already pruned
    by past feedback). Score each candidate as the sum of its DISTINCT
    letters' frequencies, with dictionary weight as the secondary key.

Why it works:
  - Early turns: favors words that cover common letters (shrinks space fast).
  - Later turns: histogram reflects constraints; top-scoring word tends to fit.

Notes:
  - Ignores positions.
  - Only surviving candidates are ever guessed, so every guess can still win.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Tuple
from .base import RankedSolver, register


@register
class LetterFreqSolver(RankedSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._counts: Counter = Counter()

    def goodness(self, word: str, weight: int) -> Tuple[int, int]:
        """
        Sum letter frequencies but count each letter at most once per word
        (prefer 'slate' over 'sleet' when counts are similar).
        """
        return sum(self._counts[ch] for ch in set(word)), weight

    def choose(self, entries: List[Tuple[str, int]]) -> str:
        self._counts = Counter("".join(w for w, _ in entries))
        return super().choose(entries)

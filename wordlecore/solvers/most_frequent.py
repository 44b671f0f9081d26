"""
Most-Frequent solver (baseline).

Strategy:
  - Prune with the newest feedback, then guess the surviving candidate with
    the highest dictionary frequency.
  - Ties go to the alphabetically first word.

This is the reference implementation of the guessing contract; smarter
solvers plug a different goodness function into the same machinery.
"""

from __future__ import annotations

from .base import RankedSolver, register


@register
class MostFrequentSolver(RankedSolver):
    id = "most_frequent"
    name = "Most Frequent Candidate"
    version = "1.0.0"

    def goodness(self, word: str, weight: int) -> int:
        return weight

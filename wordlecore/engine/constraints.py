"""
Candidate filtering given game history.

A candidate stays possible after a round iff it would have produced exactly
the observed mask had it been the answer, i.e.

    is_consistent(prior, w)  <=>  score(w, prior.word) == prior.mask

`is_consistent` answers that without building the mask: it walks the guess
once for greens and once for the rest, claiming candidate positions in the
same order the scorer consumes answer positions. Getting the claiming order
wrong is what breaks pruning on duplicate letters.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .correctness import WORD_LENGTH, Correctness, Guess, check_word


def is_consistent(prior: Guess, candidate: str) -> bool:
    """
    True if `candidate` could still be the answer after `prior`.

    Raises:
      InvalidLength if `candidate` is not exactly WORD_LENGTH letters.
    """
    check_word(candidate)
    word, mask = prior.word, prior.mask
    claimed = [False] * WORD_LENGTH

    # Greens must match; every other position must NOT match, otherwise the
    # scorer would have reported it green.
    for i in range(WORD_LENGTH):
        if mask[i] is Correctness.CORRECT:
            if candidate[i] != word[i]:
                return False
            claimed[i] = True
        elif candidate[i] == word[i]:
            return False

    for i in range(WORD_LENGTH):
        c = mask[i]
        if c is Correctness.CORRECT:
            continue
        letter = word[i]
        hit = -1
        for j in range(WORD_LENGTH):
            if not claimed[j] and candidate[j] == letter:
                hit = j
                break
        if c is Correctness.MISPLACED:
            if hit < 0:
                return False
            claimed[hit] = True
        elif hit >= 0:
            # ABSENT, yet an unclaimed copy of the letter is still there
            return False

    return True


def filter_candidates(words: Iterable[str], history: Sequence[Guess]) -> List[str]:
    """
    Keep only words consistent with every Guess in `history`.

    Order is preserved as in `words`.
    """
    return [w for w in words if all(is_consistent(g, w) for g in history)]

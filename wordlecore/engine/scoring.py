"""
Feedback scoring for a single (answer, guess) pair.

Algorithm (two-pass, canonical for Wordle):
  1) Exact matches are marked CORRECT and their answer position is consumed.
  2) Every other guess position, left to right, claims the first unconsumed
     answer position holding the same letter (MISPLACED) or, if none is
     left, is ABSENT.

Each answer letter can satisfy at most one guess position, and greens are
always resolved before yellows, so surplus duplicates in the guess come out
ABSENT rather than MISPLACED.
"""

from __future__ import annotations

from typing import List

from wordlecore.errors import InvalidLength
from .correctness import WORD_LENGTH, Correctness, Mask, check_word

# Alternative spellings accepted by parse_mask (digits as used by 0/1/2 feeds,
# 'B' for black/gray tiles).
_SYMBOLS = {
    "G": Correctness.CORRECT, "2": Correctness.CORRECT,
    "Y": Correctness.MISPLACED, "1": Correctness.MISPLACED,
    "-": Correctness.ABSENT, "B": Correctness.ABSENT, ".": Correctness.ABSENT,
    "_": Correctness.ABSENT, "0": Correctness.ABSENT,
}


def score(answer: str, guess: str) -> Mask:
    """
    Compute the feedback mask for `guess` against the hidden `answer`.

    Raises:
      InvalidLength if either word is not exactly WORD_LENGTH letters.

    Examples:
      score("aabbb", "aaccc") -> (G, G, -, -, -)
      score("aabbb", "bbcca") -> (Y, Y, -, -, Y)
    """
    check_word(answer)
    check_word(guess)

    mask: List[Correctness] = [Correctness.ABSENT] * WORD_LENGTH
    consumed = [False] * WORD_LENGTH

    # Pass 1: greens
    for i in range(WORD_LENGTH):
        if answer[i] == guess[i]:
            mask[i] = Correctness.CORRECT
            consumed[i] = True

    # Pass 2: yellows, one answer occurrence per guess position
    for i in range(WORD_LENGTH):
        if mask[i] is Correctness.CORRECT:
            continue
        for j in range(WORD_LENGTH):
            if not consumed[j] and answer[j] == guess[i]:
                consumed[j] = True
                mask[i] = Correctness.MISPLACED
                break

    return tuple(mask)


def is_solved(mask: Mask) -> bool:
    return all(c is Correctness.CORRECT for c in mask)


def format_mask(mask: Mask) -> str:
    """Render a mask as a 'G'/'Y'/'-' string, e.g. 'GY--G'."""
    return "".join(c.value for c in mask)


def parse_mask(text: str) -> Mask:
    """
    Parse a feedback string typed by a human or read from a report.

    Accepts G/Y/- (also B, '.', '_' for absent) or the digits 2/1/0,
    case-insensitively. Raises InvalidLength for the wrong number of symbols
    and ValueError for anything unrecognized.
    """
    symbols = text.strip().upper()
    if len(symbols) != WORD_LENGTH:
        raise InvalidLength(symbols, WORD_LENGTH)
    try:
        return tuple(_SYMBOLS[ch] for ch in symbols)
    except KeyError as e:
        raise ValueError(f"unknown feedback symbol {e.args[0]!r} in {text!r}") from None

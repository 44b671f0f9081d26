"""
Feedback types shared by the scorer, the constraint checker and the solvers.

Conventions:
  - Correctness.CORRECT   ('G') : right letter, right position
  - Correctness.MISPLACED ('Y') : letter is in the answer, elsewhere
  - Correctness.ABSENT    ('-') : letter not in the answer (or every
                                  occurrence already claimed)

A Mask is a tuple of WORD_LENGTH Correctness values. It only means something
next to the word it was computed for, so the two travel together as a Guess.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from wordlecore.errors import InvalidLength

WORD_LENGTH = 5


class Correctness(Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    ABSENT = "-"


Mask = Tuple[Correctness, ...]


def check_word(word: str) -> str:
    """Raise InvalidLength unless `word` has exactly WORD_LENGTH letters."""
    if len(word) != WORD_LENGTH:
        raise InvalidLength(word, WORD_LENGTH)
    return word


@dataclass(frozen=True)
class Guess:
    """One round of history: the proposed word and the feedback it received."""
    word: str
    mask: Mask

    def __post_init__(self):
        check_word(self.word)
        if len(self.mask) != WORD_LENGTH:
            raise InvalidLength(self.mask, WORD_LENGTH)
        # Correctness("G") -> CORRECT; unknown symbols raise ValueError.
        # A tuple also keeps the dataclass hashable.
        object.__setattr__(self, "mask", tuple(Correctness(c) for c in self.mask))

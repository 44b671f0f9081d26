"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exactly WORD_LENGTH letters
  - it is a key of the loaded dictionary

The harness uses the raising form (`require_in_dictionary`); the CLIs use the
boolean form to reject user input politely.
"""

from __future__ import annotations

from typing import Container

from wordlecore.errors import OutOfDictionary
from .correctness import WORD_LENGTH


def validate_guess(word, dictionary: Container[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    `dictionary` only needs membership tests, so the word->weight mapping can
    be passed as-is.
    """
    if not isinstance(word, str):
        return False

    # Shape/characters check
    if len(word) != WORD_LENGTH or not (word.isascii() and word.isalpha() and word.islower()):
        return False

    return word in dictionary


def require_in_dictionary(word: str, dictionary: Container[str]) -> str:
    """Return `word` unchanged, or raise OutOfDictionary."""
    if not validate_guess(word, dictionary):
        raise OutOfDictionary(word)
    return word

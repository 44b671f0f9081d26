"""
Error taxonomy for wordlecore.

None of these are transient: they signal a caller bug or bad data, so they
are never retried and always propagate to end the offending game (or the
whole run, for dictionary load failures).
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for every wordlecore error."""


class InvalidLength(WordleError, ValueError):
    """A word or mask does not have exactly WORD_LENGTH positions."""

    def __init__(self, value, expected: int):
        self.value = value
        self.expected = expected
        super().__init__(f"expected length {expected}, got {len(value)}: {value!r}")


class MalformedDictionaryEntry(WordleError, ValueError):
    """A dictionary line could not be parsed as '<word> <frequency>'."""

    def __init__(self, path, lineno: int, line: str, reason: str):
        self.path = str(path)
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"{self.path}:{lineno}: {reason} ({line!r})")


class Exhausted(WordleError, RuntimeError):
    """A solver was asked for a guess but no candidate survives."""


class OutOfDictionary(WordleError, ValueError):
    """A solver returned a guess that is not a dictionary word."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"guess {word!r} is not in the dictionary")

from __future__ import annotations
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from wordlecore.engine import WORD_LENGTH
from wordlecore.errors import MalformedDictionaryEntry


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def parse_entry(line: str) -> Tuple[str, int]:
    """
    Parse one '<word> <frequency>' line. Raises ValueError with a short
    reason when the line doesn't fit; load_dictionary adds the location.
    """
    parts = line.split()
    if len(parts) != 2:
        raise ValueError("expected '<word> <frequency>'")
    word, freq = parts[0].lower(), parts[1]
    if len(word) != WORD_LENGTH or not (word.isascii() and word.isalpha()):
        raise ValueError(f"word must be {WORD_LENGTH} letters a-z")
    if not (freq.isascii() and freq.isdigit()):
        raise ValueError("frequency must be a non-negative integer")
    return word, int(freq)


def load_dictionary(p: Path | str) -> Mapping[str, int]:
    """
    Load a word -> frequency dictionary, one '<word> <frequency>' per line.

    Blank lines are skipped; words are lowercased. Any other irregularity
    (missing separator, non-numeric frequency, bad word, duplicate) raises
    MalformedDictionaryEntry: a broken dictionary must stop the run before
    any game starts.

    The result is read-only so it can be shared between games.
    """
    out: Dict[str, int] = {}
    for lineno, raw in enumerate(read_lines(p), start=1):
        if not raw.strip():
            continue
        try:
            word, freq = parse_entry(raw)
        except ValueError as e:
            raise MalformedDictionaryEntry(p, lineno, raw, str(e)) from None
        if word in out:
            raise MalformedDictionaryEntry(p, lineno, raw, f"duplicate word {word!r}")
        out[word] = freq
    return MappingProxyType(out)


def read_answers(p: Path | str) -> List[str]:
    """Whitespace-separated answer words, lowercased, in file order."""
    return [w.lower() for ln in read_lines(p) for w in ln.split()]

"""
Dataset validator for wordlecore.

What this module does:
- Validate a dictionary file ('<word> <frequency>' per line) and, optionally,
  an answers list (whitespace-separated words).
- Count invalid lines and duplicates; compute SHA-256 of the raw files.
- Check that answers ⊆ dictionary.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Unlike load_dictionary, nothing here raises on bad content: the point is to
report every problem at once before a run.

Typical use:
    from wordlecore.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("data/dictionary.txt", "data/answers.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from wordlecore.engine import WORD_LENGTH
from .io import parse_entry


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (dictionary, answers) pair."""
    word_length: int
    dictionary: FileReport
    answers: Optional[FileReport]
    answers_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_dictionary(path: Path) -> Tuple[List[str], int]:
    """Return (valid_words, invalid_count). Blank lines are not counted."""
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            if not raw.strip():
                continue
            try:
                word, _ = parse_entry(raw)
            except ValueError:
                invalid += 1
                continue
            valid.append(word)
    return valid, invalid


def _check_answers(path: Path) -> Tuple[List[str], int]:
    """Return (valid_words, invalid_count) for a whitespace-separated list."""
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            for tok in raw.split():
                w = tok.lower()
                if len(w) == WORD_LENGTH and w.isascii() and w.isalpha():
                    valid.append(w)
                else:
                    invalid += 1
    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def _missing(path: str) -> FileReport:
    return FileReport(path, False, 0, "", 0, 0)


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(dictionary_path: str, answers_path: Optional[str] = None) -> Dict:
    """
    Validate the dictionary file and (optionally) an answers list.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - answers ⊆ dictionary check (True when no answers file is given)
          - `passed` boolean (strict: non-empty, no invalids, no duplicate
            dictionary words, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    dict_p = Path(dictionary_path)
    ans_p = Path(answers_path) if answers_path else None

    dict_exists = dict_p.exists()
    ans_exists = ans_p.exists() if ans_p else True

    # Early return if either file is missing
    if not dict_exists or not ans_exists:
        if not dict_exists:
            issues.append(f"dictionary file not found: {dictionary_path}")
        if not ans_exists:
            issues.append(f"answers file not found: {answers_path}")
        rep = ValidationReport(
            word_length=WORD_LENGTH,
            dictionary=_missing(dictionary_path),
            answers=_missing(answers_path) if answers_path else None,
            answers_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, dict_invalid = _check_dictionary(dict_p)
    dict_report = _file_report(dict_p, words, dict_invalid)

    ans_report = None
    subset_ok = True
    ans_invalid = 0
    if ans_p is not None:
        answers, ans_invalid = _check_answers(ans_p)
        ans_report = _file_report(ans_p, answers, ans_invalid)
        missing = sorted(set(answers) - set(words))
        subset_ok = not missing
        if not subset_ok:
            # Surface a few examples to debug quickly (limit to 5 for brevity)
            issues.append(f"answers not subset of dictionary (e.g., {missing[:5]})")
        if ans_report.count == 0:
            issues.append("answers file contains 0 valid words")
        if ans_invalid:
            issues.append(f"answers has {ans_invalid} invalid word(s)")

    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid entries")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")
    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate words")

    passed = (
            subset_ok
            and dict_invalid == 0
            and ans_invalid == 0
            and dict_report.count > 0
            and dict_report.count == dict_report.unique_count
            and (ans_report is None or ans_report.count > 0)
    )

    rep = ValidationReport(
        word_length=WORD_LENGTH,
        dictionary=dict_report,
        answers=ans_report,
        answers_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=12947 (uniq=12947, sha=abc123...) | answers=2315 (uniq=2315, sha=def456...) | answers⊆dictionary=True | OK
    """
    d = report["dictionary"]
    a = report.get("answers")
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    out = f"dictionary={d['count']} (uniq={d['unique_count']}, sha={(d.get('sha256') or '')[:12]})"
    if a is not None:
        out += f" | answers={a['count']} (uniq={a['unique_count']}, sha={(a.get('sha256') or '')[:12]})"
    return out + f" | answers⊆dictionary={report['answers_subset_dictionary']} | {status}"

from pathlib import Path

import pytest
from wordlecore.datasets import load_dictionary, pretty_summary, read_answers, validate_dictionary
from wordlecore.errors import MalformedDictionaryEntry


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_dictionary_happy_path(tmp_path: Path):
    p = tmp_path / "dictionary.txt"
    _write(p, ["crane 120", "", "Raise 7", "stare\t0"])
    d = load_dictionary(p)
    assert dict(d) == {"crane": 120, "raise": 7, "stare": 0}
    assert list(d) == ["crane", "raise", "stare"]
    with pytest.raises(TypeError):
        d["slate"] = 1


@pytest.mark.parametrize("bad", ["crane", "crane many", "crane 5 6", "cranes 5", "cr4ne 5",
                                 "crane -3", "crane 2.5"])
def test_load_dictionary_rejects_malformed_line(tmp_path: Path, bad):
    p = tmp_path / "dictionary.txt"
    _write(p, ["stare 3", bad])
    with pytest.raises(MalformedDictionaryEntry) as ei:
        load_dictionary(p)
    assert ei.value.lineno == 2


def test_load_dictionary_rejects_duplicates(tmp_path: Path):
    p = tmp_path / "dictionary.txt"
    _write(p, ["stare 3", "crane 1", "STARE 4"])
    with pytest.raises(MalformedDictionaryEntry, match="duplicate"):
        load_dictionary(p)


def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nope.txt")


def test_read_answers(tmp_path: Path):
    p = tmp_path / "answers.txt"
    p.write_text("crane Stare\n\nslate\n", encoding="utf-8")
    assert read_answers(p) == ["crane", "stare", "slate"]


def test_validate_dictionary_happy_path(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    a = tmp_path / "answers.txt"
    _write(d, ["crane 5", "raise 3", "stare 9", "trace 2"])
    _write(a, ["crane raise", "stare"])

    rep = validate_dictionary(str(d), str(a))
    assert rep["passed"] is True
    assert rep["answers_subset_dictionary"] is True
    assert rep["dictionary"]["count"] == 4 and rep["answers"]["count"] == 3
    s = pretty_summary(rep)
    assert "dictionary=4" in s and "answers⊆dictionary=True" in s and s.endswith("OK")


def test_validate_dictionary_without_answers(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["crane 5"])
    rep = validate_dictionary(str(d))
    assert rep["passed"] is True and rep["answers"] is None
    assert "answers=" not in pretty_summary(rep)


def test_validate_dictionary_flags_errors(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["crane 5", "cranes 1", "stare x", "crane 2"])

    rep = validate_dictionary(str(d))
    assert rep["passed"] is False
    assert rep["dictionary"]["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_subset_violation(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    a = tmp_path / "answers.txt"
    _write(d, ["crane 5", "stare 9"])
    _write(a, ["crane", "raise", "stare"])

    rep = validate_dictionary(str(d), str(a))
    assert rep["passed"] is False
    assert rep["answers_subset_dictionary"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_dictionary_missing_file(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["dictionary"]["exists"] is False
    assert "FAIL" in pretty_summary(rep)

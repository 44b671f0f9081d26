import itertools

import pytest
from wordlecore.engine import (
    Correctness, Guess, score, is_solved, format_mask, parse_mask,
    is_consistent, filter_candidates, validate_guess, require_in_dictionary,
)
from wordlecore.errors import InvalidLength, OutOfDictionary

G, Y, A = Correctness.CORRECT, Correctness.MISPLACED, Correctness.ABSENT

WORDS = ["aabbb", "bbcca", "abbab", "aaacc", "baccc", "aaddd", "level", "belle",
         "lemon", "scoop", "cools", "eerie", "geese", "crane", "stare"]


# --- duplicate-letter anchors (answer, guess) ---
@pytest.mark.parametrize("answer,guess,expected", [
    ("aabbb", "aaccc", (G, G, A, A, A)),
    ("aabbb", "bbcca", (Y, Y, A, A, Y)),
    ("abbab", "aaacc", (G, Y, A, A, A)),
    ("baccc", "aaddd", (A, G, A, A, A)),
])
def test_score_duplicate_letters(answer, guess, expected):
    assert score(answer, guess) == expected


@pytest.mark.parametrize("answer,guess,expected", [
    ("level", "belle", "-GYYY"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
])
def test_score_golden(answer, guess, expected):
    assert format_mask(score(answer, guess)) == expected


@pytest.mark.parametrize("word", WORDS)
def test_score_self_match(word):
    assert score(word, word) == (G,) * 5
    assert is_solved(score(word, word))


def test_score_disjoint_is_all_absent():
    assert score("moved", "light") == (A,) * 5
    assert not is_solved(score("moved", "light"))


@pytest.mark.parametrize("answer,guess", [("crane", "cranes"), ("cran", "crane"), ("", "")])
def test_score_rejects_wrong_length(answer, guess):
    with pytest.raises(InvalidLength):
        score(answer, guess)


def test_parse_mask_accepts_aliases():
    assert parse_mask("GY-b.") == (G, Y, A, A, A)
    assert parse_mask("21000") == (G, Y, A, A, A)
    with pytest.raises(InvalidLength):
        parse_mask("GY")
    with pytest.raises(ValueError):
        parse_mask("GYXGG")


def test_guess_validates_lengths():
    with pytest.raises(InvalidLength):
        Guess("cran", (G,) * 4)
    with pytest.raises(InvalidLength):
        Guess("crane", (G,) * 4)
    g = Guess("crane", [G, G, G, G, G])
    assert g.mask == (G,) * 5
    hash(g)


# --- constraint checker ---
def test_is_consistent_misplaced_needs_unclaimed_copy():
    prior = Guess("aaccc", (G, Y, A, A, A))   # answer had exactly two 'a's
    assert is_consistent(prior, "abbab")
    assert not is_consistent(prior, "abbbb")  # only one 'a'
    assert not is_consistent(prior, "aabbb")  # 2nd 'a' would have been green


def test_is_consistent_absent_allows_claimed_copies():
    prior = Guess("aaddd", (A, G, A, A, A))
    # the 'a' at position 1 is green; position 0 absent means no other 'a'
    assert is_consistent(prior, "baccc")
    assert not is_consistent(prior, "bacca")


def test_is_consistent_rejects_wrong_length():
    with pytest.raises(InvalidLength):
        is_consistent(Guess("crane", (A,) * 5), "cranes")


@pytest.mark.parametrize("answer,guess", list(itertools.product(WORDS, repeat=2)))
def test_answer_is_consistent_with_its_own_feedback(answer, guess):
    assert is_consistent(Guess(guess, score(answer, guess)), answer)


def test_is_consistent_matches_rescoring():
    for answer, guess in itertools.product(WORDS, repeat=2):
        prior = Guess(guess, score(answer, guess))
        for cand in WORDS:
            expected = score(cand, guess) == prior.mask
            assert is_consistent(prior, cand) is expected, (answer, guess, cand)


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [Guess("raise", parse_mask("YY--G"))]
    cand = filter_candidates(words, history)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand
    assert cand == [w for w in words if w in cand]


def test_filter_candidates_empty_history_keeps_everything():
    assert filter_candidates(["crane", "stare"], []) == ["crane", "stare"]


# --- guess validation ---
def test_validate_guess():
    dictionary = {"crane": 3, "raise": 1, "stare": 2}
    assert validate_guess("crane", dictionary) is True
    assert validate_guess("CRANE", dictionary) is False
    assert validate_guess("cranes", dictionary) is False
    assert validate_guess("trace", dictionary) is False
    assert validate_guess(None, dictionary) is False
    assert require_in_dictionary("stare", dictionary) == "stare"
    with pytest.raises(OutOfDictionary):
        require_in_dictionary("trace", dictionary)


def test_guess_accepts_pattern_strings():
    g = Guess("crane", "GGGGG")
    assert g.mask == (G,) * 5
    assert is_consistent(g, "crane")
    assert Guess("crane", "GY-Y-").mask == (G, Y, A, Y, A)
    with pytest.raises(ValueError):
        Guess("crane", "GGXGG")

import pytest
from wordlecore.engine import CandidatePool, Guess, score
from wordlecore.errors import InvalidLength

DICTIONARY = {"crane": 5, "raise": 3, "stare": 9, "trace": 2, "cared": 1, "scoop": 4}


def test_pool_starts_as_copy_of_dictionary():
    d = dict(DICTIONARY)
    pool = CandidatePool(d)
    assert len(pool) == len(d)
    assert pool.entries() == list(d.items())
    pool.prune(Guess("scoop", score("crane", "scoop")))
    assert d == DICTIONARY


@pytest.mark.parametrize("answer", list(DICTIONARY))
@pytest.mark.parametrize("guess", ["raise", "scoop", "cared"])
def test_prune_keeps_answer_and_never_grows(answer, guess):
    pool = CandidatePool(DICTIONARY)
    before = len(pool)
    removed = pool.prune(Guess(guess, score(answer, guess)))
    assert answer in pool
    assert len(pool) == before - removed <= before


def test_prune_is_idempotent():
    prior = Guess("raise", score("crane", "raise"))
    once = CandidatePool(DICTIONARY)
    once.prune(prior)
    twice = CandidatePool(DICTIONARY)
    twice.prune(prior)
    assert twice.prune(prior) == 0
    assert once.entries() == twice.entries()


def test_prune_narrows_to_consistent_words():
    pool = CandidatePool(DICTIONARY)
    pool.prune(Guess("raise", score("crane", "raise")))
    assert "stare" not in pool and "scoop" not in pool
    assert pool.weight("crane") == 5
    # surviving order follows the dictionary
    assert pool.words() == [w for w in DICTIONARY if w in pool]


def test_pool_rejects_bad_entries():
    with pytest.raises(InvalidLength):
        CandidatePool({"cranes": 1})
    with pytest.raises(ValueError):
        CandidatePool({"crane": -1})


def test_empty_pool_is_falsy():
    pool = CandidatePool({"crane": 1})
    assert pool
    pool.prune(Guess("crane", score("stare", "crane")))
    assert not pool and len(pool) == 0

"""
Experiment harness core primitives.

- play:      run one game, return the winning round or None.
- run_case:  run a single puzzle (one hidden answer) and return a result dict.
- select_cases: reproducible sampling of the answers to play.
- run_batch: run many puzzles in sequence; a broken game does not stop the batch.

Each round is strictly: ask the solver -> check the guess is a dictionary
word -> score it against the answer -> append to history. The round ceiling
lives here, not in the solvers; they have no notion of the game ending.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import random
import time
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from wordlecore.engine import Guess, check_word, require_in_dictionary, score
from wordlecore.errors import WordleError

# Default round ceiling for simulated games.
MAX_ROUNDS = 32


def run_case(
        solver,
        answer: str,
        *,
        dictionary: Mapping[str, int],
        max_rounds: int = MAX_ROUNDS,
) -> Dict:
    """
    Execute one game until the solver wins or the round budget is exhausted.

    Args:
        solver:     object with reset(dictionary=...) and guess(history)
        answer:     the hidden word for this case
        dictionary: word -> frequency weight, shared read-only across games
        max_rounds: round ceiling

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[Guess]), answer (str), solver_id (str)

    Raises:
        InvalidLength   if `answer` is malformed
        OutOfDictionary if the solver proposes a non-dictionary word
        Exhausted       if the solver runs out of candidates
    """
    check_word(answer)
    if max_rounds < 1:
        raise ValueError(f"max_rounds must be positive; got {max_rounds}")

    solver.reset(dictionary=dictionary)
    history: List[Guess] = []

    t0 = time.perf_counter()
    for rnd in range(1, max_rounds + 1):
        # Solvers get a snapshot so they can't rewrite the past
        word = solver.guess(tuple(history))
        require_in_dictionary(word, dictionary)

        history.append(Guess(word, score(answer, word)))

        if word == answer:
            return _result(solver, answer, True, rnd, t0, history)

    return _result(solver, answer, False, max_rounds, t0, history)


def _result(solver, answer: str, success: bool, rounds: int, t0: float,
            history: List[Guess]) -> Dict:
    return {
        "success": success,
        "guesses": rounds,
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
        "answer": answer,
        "solver_id": getattr(solver, "id", type(solver).__name__),
    }


def play(
        answer: str,
        solver,
        *,
        dictionary: Mapping[str, int],
        max_rounds: int = MAX_ROUNDS,
) -> Optional[int]:
    """Round number the solver found `answer` in, or None if it never did."""
    r = run_case(solver, answer, dictionary=dictionary, max_rounds=max_rounds)
    return r["guesses"] if r["success"] else None


def select_cases(
        answers: Iterable[str],
        *,
        sample: int | None = None,
        seed: int | None = None,
) -> List[str]:
    """
    Pick the answers a batch will play.

    With 'sample' = K, K answers are kept: a seeded shuffle when 'seed' is
    given, otherwise the first K in file order. Either way the choice is
    reproducible.
    """
    pool = list(answers)
    if sample is None or sample >= len(pool):
        return pool
    if seed is not None:
        random.Random(seed).shuffle(pool)
    return pool[:sample]


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        dictionary: Mapping[str, int],
        max_rounds: int = MAX_ROUNDS,
        sample: int | None = None,
        seed: int | None = None,
        on_result: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back with the same solver instance (reset per
    game). Cases come from select_cases(answers, sample=..., seed=...).

    A game that breaks the rules (Exhausted, OutOfDictionary, InvalidLength)
    ends only that game: it is recorded as unsolved with an 'error' entry
    and the batch moves on. `on_result` is called after every game.
    """
    out: List[Dict] = []
    for ans in select_cases(answers, sample=sample, seed=seed):
        try:
            r = run_case(solver, ans, dictionary=dictionary, max_rounds=max_rounds)
        except WordleError as e:
            r = {
                "success": False,
                "guesses": 0,
                "time_ms": 0.0,
                "history": [],
                "answer": ans,
                "solver_id": getattr(solver, "id", type(solver).__name__),
                "error": f"{type(e).__name__}: {e}",
            }
        out.append(r)
        if on_result is not None:
            on_result(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: games, solved, failed (games ended by an error),
    solve_rate, mean_rounds (over solved games only; None if nothing was
    solved) and a rounds histogram.
    """
    solved = [r["guesses"] for r in results if r["success"]]
    histogram: Dict[int, int] = {}
    for g in solved:
        histogram[g] = histogram.get(g, 0) + 1
    return {
        "games": len(results),
        "solved": len(solved),
        "failed": sum(1 for r in results if r.get("error")),
        "solve_rate": (len(solved) / len(results)) if results else 0.0,
        "mean_rounds": (sum(solved) / len(solved)) if solved else None,
        "histogram": dict(sorted(histogram.items())),
    }

from __future__ import annotations
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Type

from wordlecore.engine import CandidatePool, Guess
from wordlecore.errors import Exhausted

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}

Goodness = Callable[[str, int], Any]


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    One instance plays one game at a time: `reset` starts a fresh pool, then
    `guess` is called once per round with the whole history so far.

    The solver keeps its pool in step with the history itself, pruning with
    every entry it has not seen yet (normally just the newest one).
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.pool: Optional[CandidatePool] = None
        self.rounds_seen: int = 0

    def reset(self, *, dictionary: Mapping[str, int]) -> None:
        self.pool = CandidatePool(dictionary)
        self.rounds_seen = 0

    def sync(self, history: Sequence[Guess]) -> None:
        if self.pool is None:
            raise RuntimeError("call reset() before guess()")
        if len(history) < self.rounds_seen:
            raise ValueError(
                f"history has {len(history)} rounds but {self.rounds_seen} were already seen; "
                "reset() the solver between games")
        for prior in history[self.rounds_seen:]:
            self.pool.prune(prior)
        self.rounds_seen = len(history)

    def guess(self, history: Sequence[Guess]) -> str:
        self.sync(history)
        if not self.pool:
            raise Exhausted(f"{self.id}: no candidates left after {self.rounds_seen} round(s)")
        return self.choose(self.pool.entries())

    def choose(self, entries: List[Tuple[str, int]]) -> str:
        raise NotImplementedError("Override in subclass")


class RankedSolver(BaseSolver):
    """
    Pick the surviving candidate with the highest goodness(word, weight).

    Goodness can be any orderable value (numbers, tuples, ...). Ties go to the
    alphabetically first word so runs are reproducible. Subclasses override
    `goodness`; ad-hoc rankings can pass a function instead.
    """
    id = "ranked"
    name = "Ranked"

    def __init__(self, goodness: Goodness | None = None):
        super().__init__()
        if goodness is not None:
            self.goodness = goodness

    def goodness(self, word: str, weight: int):
        raise NotImplementedError("Override in subclass or pass goodness=")

    def choose(self, entries: List[Tuple[str, int]]) -> str:
        # max() keeps the first of equal keys, so sort by word first
        best = max(sorted(entries), key=lambda e: self.goodness(e[0], e[1]))
        return best[0]

# apps/cli/suggest.py
"""
Suggest the next guess for a game played elsewhere.

Give the feedback seen so far as WORD=PATTERN pairs, in round order:

    python -m apps.cli.suggest --dictionary data/dictionary.txt crane=-GY-- tread=.gy..

Patterns use G/Y/- (or B/./_ for gray, or 2/1/0). The chosen solver prunes
its pool with that history and prints its pick plus how many candidates are
left.
"""

from __future__ import annotations

import argparse
from typing import List

from wordlecore.datasets import load_dictionary
from wordlecore.engine import Guess, parse_mask
from wordlecore.errors import Exhausted
from wordlecore.solvers import create_solver, get_solver_ids


def parse_history(pairs: List[str]) -> List[Guess]:
    """Turn ['crane=-GY--', ...] into Guess entries (ValueError on bad input)."""
    out: List[Guess] = []
    for item in pairs:
        word, sep, patt = item.partition("=")
        if not sep:
            raise ValueError(f"expected WORD=PATTERN, got {item!r}")
        out.append(Guess(word.strip().lower(), parse_mask(patt)))
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordlecore — suggest the next guess")
    ap.add_argument("history", nargs="*", help="WORD=PATTERN pairs, oldest first")
    ap.add_argument("--solver", default="most_frequent",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--dictionary", default="data/dictionary.txt",
                    help="path to '<word> <frequency>' dictionary")
    ap.add_argument("--show", type=int, default=10, help="list up to this many candidates")
    args = ap.parse_args(argv)

    try:
        history = parse_history(args.history)
    except ValueError as e:
        ap.error(str(e))

    dictionary = load_dictionary(args.dictionary)
    solver = create_solver(args.solver)
    solver.reset(dictionary=dictionary)

    try:
        guess = solver.guess(history)
    except Exhausted:
        ap.error("no dictionary word fits that feedback; check the words and patterns")
    left = solver.pool.entries()

    print(f"Candidates left: {len(left)}")
    for w, f in sorted(left, key=lambda e: (-e[1], e[0]))[: args.show]:
        print(f"  {w} {f}")
    print(f"Next guess ({solver.id}): {guess}")


if __name__ == "__main__":
    main()

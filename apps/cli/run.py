# apps/cli/run.py
"""
CLI entry point for running wordlecore experiments.

This script:
  1) Validates the dictionary (+ answers list) and prints a one-line summary.
  2) Loads the dictionary and instantiates the requested solver.
  3) Runs a batch of games with a live progress indicator and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dictionary hashes, git commit, summary.

A dictionary that fails to load aborts the run. A game whose solver breaks
the guessing contract (Exhausted / OutOfDictionary) ends only that game: it is
listed with its error, counted as failed, and the batch carries on.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordlecore.datasets import validate_dictionary, pretty_summary, load_dictionary, read_answers
from wordlecore.harness import MAX_ROUNDS, run_batch, select_cases, summarize
from wordlecore.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlecore.solvers import create_solver, get_solver_ids


def main(argv=None):
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    # Build help text showing currently registered solver IDs
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlecore — run solver experiments")
    ap.add_argument("--solver", default="most_frequent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--dictionary", default="data/dictionary.txt",
                    help="path to '<word> <frequency>' dictionary")
    ap.add_argument("--answers", default="data/answers.txt",
                    help="path to answers list (whitespace-separated)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--max-rounds", type=int, default=MAX_ROUNDS, help="round ceiling per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    # 1) Validate and print a one-liner summary (counts, SHAs, subset check)
    rep = validate_dictionary(args.dictionary, args.answers)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    # 2) Load; a malformed dictionary raises here and ends the run
    dictionary = load_dictionary(args.dictionary)
    answers = read_answers(args.answers)

    # 3) Instantiate solver by id
    solver = create_solver(args.solver)

    # 4) Choose cases (deterministic sample by seed)
    cases = select_cases(answers, sample=args.sample, seed=args.seed)
    total = len(cases)

    # 5) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    start = time.time()
    last_print = 0.0
    done = 0
    bar = tqdm(total=total, ncols=80, desc="Running", unit="game") if mode == "bar" else None

    def _progress(_result):
        nonlocal done, last_print
        done += 1
        if bar is not None:
            bar.update(1)
        elif mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (done == total):
                elapsed = now - start
                rate = (done / elapsed) if elapsed > 0 else 0.0
                remaining = (total - done) / rate if rate > 0 else 0.0
                pct = 100.0 * done / max(1, total)
                sys.stderr.write(
                    f"\r[{done}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    # 6) Run batch with live progress; a broken game is recorded, not fatal
    results = run_batch(solver, cases, dictionary=dictionary, max_rounds=args.max_rounds,
                        on_result=_progress)

    if bar is not None:
        bar.close()
    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    for r in results:
        if r.get("error"):
            print(f"  ! {r['answer']}: {r['error']}")

    # 7) Write outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_rounds=args.max_rounds)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    mean = summary["mean_rounds"]
    print(f"Solved {summary['solved']}/{summary['games']} "
          f"({100.0 * summary['solve_rate']:.1f}%), {summary['failed']} failed, mean rounds "
          f"{'n/a' if mean is None else f'{mean:.3f}'}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

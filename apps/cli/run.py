# apps/cli/run.py
"""
CLI entry point for the solver.

Subcommands:
  bench  Solve many random puzzles and report timing. Writes, when --outdir
         is given:
           - CSV:  per-case results + guess/pattern history columns
           - JSON: manifest with config, word-list hash, git commit, summary
  solve  Solve one random puzzle and print every guess.

Usage:
    python -m apps.cli.run --dict-path words.txt --length 5 bench --tries 100
    python -m apps.cli.run --dict-path words.txt solve --strategy letter_freq
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordle_solver.datasets import describe_wordlist, load_dictionary, pretty_summary
from wordle_solver.engine import Puzzle, Solver
from wordle_solver.errors import WordleError
from wordle_solver.harness import run_bench, summarize
from wordle_solver.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_solver.strategies import DEFAULT_STRATEGY, create_strategy, get_strategy_ids

DEFAULT_LENGTH = 5
DEFAULT_TRIES = 10

log = logging.getLogger("wordle_solver.cli")


def _bench(args, dictionary) -> None:
    """
    Run the benchmark batch with progress, print the summary, write outputs.
    """
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    bar = tqdm(total=args.tries, ncols=80, desc="Solving", unit="puzzle") if mode == "bar" else None
    start = time.time()
    last_print = 0.0

    def on_case(idx, r):
        nonlocal last_print
        if bar is not None:
            bar.update(1)
        elif mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == args.tries):
                pct = 100.0 * idx / max(1, args.tries)
                sys.stderr.write(f"\r[{idx}/{args.tries}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    try:
        results = run_bench(dictionary, args.length, args.tries,
                            strategy=args.strategy, seed=args.seed, on_case=on_case)
    finally:
        if bar is not None:
            bar.close()
        elif mode == "plain":
            sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results)
    per_try = summary["mean_time_ms"]
    print(f"{args.strategy}: {per_try:.3f}ms per each try "
          f"| solved {summary['solved']}/{summary['cases']} "
          f"| mean guesses {summary['mean_guesses']:.2f} (max {summary['max_guesses']})")

    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = write_csv(results, str(outdir / f"bench_{run_id}.csv"))
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": {k: v for k, v in vars(args).items() if k not in ("func", "report")},
            "wordlist": args.report,
            "summary": summary,
        }
        manifest_path = write_manifest(manifest, str(outdir / f"bench_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


def _solve(args, dictionary) -> None:
    rng = random.Random(args.seed)
    puzzle = Puzzle.new(args.length, dictionary, rng)
    solver = Solver(create_strategy(args.strategy), rng)
    result = solver.run(puzzle, dictionary)
    for i, g in enumerate(result.guesses, 1):
        print(f"{i:3d}. {g.word}  {g.check.pattern()}  ({g.remaining} left)")
    print(f"Solved: {result.word} in {len(result.guesses)} guesses")


def build_parser() -> argparse.ArgumentParser:
    strategy_choices = get_strategy_ids()

    ap = argparse.ArgumentParser(description="wordle_solver - solve word-guessing puzzles")
    ap.add_argument("-d", "--dict-path", required=True,
                    help="path to dictionary, a plain file with one word per line")
    ap.add_argument("-l", "--length", type=int, default=DEFAULT_LENGTH, help="length of the word")
    ap.add_argument("--seed", type=int, help="base RNG seed (for reproducibility)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log every solver iteration")

    sub = ap.add_subparsers(dest="command", required=True)

    bench = sub.add_parser("bench", help="benchmark the solver on random puzzles")
    bench.add_argument("-t", "--tries", type=int, default=DEFAULT_TRIES, help="number of puzzles")
    bench.add_argument("--strategy", default=DEFAULT_STRATEGY, choices=strategy_choices,
                       help="guess selection strategy")
    bench.add_argument("--outdir", help="directory for CSV + manifest (skipped if omitted)")
    bench.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    bench.set_defaults(func=_bench)

    solve = sub.add_parser("solve", help="solve one random puzzle and show each guess")
    solve.add_argument("--strategy", default=DEFAULT_STRATEGY, choices=strategy_choices,
                       help="guess selection strategy")
    solve.set_defaults(func=_solve)

    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        # Report the raw list first (counts, SHA), then load it
        args.report = describe_wordlist(args.dict_path)
        print(pretty_summary(args.report))
        dictionary = load_dictionary(args.dict_path)
        args.func(args, dictionary)
    except (WordleError, OSError, UnicodeDecodeError) as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

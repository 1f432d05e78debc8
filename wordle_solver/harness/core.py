"""
Benchmark harness core primitives.

- run_case:  solve one puzzle with a given solver and record the outcome.
- run_bench: draw `tries` fresh puzzles of one length and solve each.
- summarize: aggregate a batch of results.

The solver itself never retries: a SolveError ends that attempt. Here the
failure is recorded on the case result so a batch can keep going; puzzle
construction errors (NoWordsForLength) still propagate since they mean the
whole run is misconfigured.

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Dict, Iterable, List

from wordle_solver.datasets.dictionary import Dictionary
from wordle_solver.engine import Puzzle, Solver
from wordle_solver.errors import SolveError
from wordle_solver.strategies import DEFAULT_STRATEGY, create_strategy

log = logging.getLogger(__name__)


def run_case(solver: Solver, puzzle: Puzzle, dictionary: Dictionary) -> Dict:
    """
    Execute one solve attempt.

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str), error (str | None)
    """
    t0 = time.perf_counter()
    try:
        result = solver.run(puzzle, dictionary)
        guesses = result.guesses
        error = None
    except SolveError as e:
        log.warning("solve failed for %r: %s", puzzle.reveal(), e)
        guesses = e.guesses
        error = type(e).__name__
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": error is None,
        "guesses": len(guesses),
        "time_ms": dt,
        "history": [(g.word, g.check.pattern()) for g in guesses],
        "answer": puzzle.reveal(),
        "error": error,
    }


def run_bench(
        dictionary: Dictionary,
        length: int,
        tries: int,
        *,
        strategy: str = DEFAULT_STRATEGY,
        seed: int | None = None,
        on_case: Callable[[int, Dict], None] | None = None,
) -> List[Dict]:
    """
    Solve `tries` independent puzzles of `length`.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases. The same per-case rng draws
    the hidden word and drives guess selection.

    `on_case(index, result)` is called after every case (progress display).

    Raises:
        NoWordsForLength if the dictionary has no words of `length`.
    """
    out: List[Dict] = []
    for idx in range(1, tries + 1):
        rng = random.Random(None if seed is None else seed + idx)
        puzzle = Puzzle.new(length, dictionary, rng)
        solver = Solver(create_strategy(strategy), rng)

        r = run_case(solver, puzzle, dictionary)
        r["strategy"] = strategy
        r["length"] = length
        out.append(r)
        if on_case is not None:
            on_case(idx, r)
    return out


def summarize(results: Iterable[Dict]) -> Dict:
    """Aggregate counts, guess statistics and mean time over a batch."""
    results = list(results)
    solved = [r for r in results if r["success"]]
    guesses = [r["guesses"] for r in solved]
    times = [r["time_ms"] for r in results]
    return {
        "cases": len(results),
        "solved": len(solved),
        "failed": len(results) - len(solved),
        "mean_guesses": (sum(guesses) / len(guesses)) if guesses else 0.0,
        "max_guesses": max(guesses) if guesses else 0,
        "mean_time_ms": (sum(times) / len(times)) if times else 0.0,
    }

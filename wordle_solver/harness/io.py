"""
Output files of a bench run.

A bench run leaves two files side by side in the output directory:
  bench_<run_id>.csv            one row per solved (or failed) puzzle
  bench_<run_id>_manifest.json  how the run was configured and what it scored

The run id is a UTC timestamp, so repeated runs never overwrite each other.
Feedback patterns such as "-GY--" start with a sign character, which
spreadsheets read as a formula; the CSV writer stores them with a leading
quote. A solve has no turn limit, so the CSV grows one guess/pattern
column pair per round of the longest case in the batch.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _as_text(patt: str) -> str:
    # leading quote keeps "-GY--" from being parsed as a formula
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Write run_bench() results to `path` and return the path.

    Columns: strategy, length, answer, success, error, guesses, time_ms,
    then guess_1, patt_1 ... guess_K, patt_K where K is the most guesses any
    case needed. `error` is the SolveError class name of a failed case.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    max_turns = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["strategy", "length", "answer", "success", "error", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "strategy": r.get("strategy", "?"),
                "length": r.get("length", len(r["answer"])),
                "answer": r["answer"],
                "success": r["success"],
                "error": r.get("error") or "",
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # one guess/pattern pair per round; shorter cases padded with blanks
            hist = r.get("history", [])
            padded = list(hist) + [("", "")] * (max_turns - len(hist))
            for i, (g, patt) in enumerate(padded, 1):
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _as_text(patt)

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump the manifest of a bench run as indented JSON.

    The CLI fills it with the run id and commit, the parsed flags (minus
    internals), the describe_wordlist() report of the dictionary file and the
    summarize() totals. Values JSON cannot encode (paths, for instance) are
    written as strings.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """Run id for output file names: current UTC time, e.g. 20261019T081500Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Short hash of the checked-out commit, recorded so a bench result can be
    traced to the solver code that produced it. Outside a git checkout, or
    without git installed, the manifest gets "unknown".
    """
    cmd = ["git", "rev-parse", "--short", "HEAD"]
    try:
        out = subprocess.run(cmd, capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip() or "unknown"

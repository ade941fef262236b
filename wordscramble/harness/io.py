"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-session results into a tidy CSV (one row per session).
- write_manifest: dump a JSON manifest with config, hashes and summary stats.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from wordscramble.errors import RejectionReason

REJECTION_COLUMNS = [f"rejected_{r.value}" for r in RejectionReason]


def write_csv(results: List[Dict], path: str, max_submissions: int) -> str:
    """
    Serialize a batch of session results to CSV.

    Schema (columns):
      player, root, score, submissions, accepted, ignored,
      rejected_<reason> (one per rejection reason), time_ms,
      word_1, outcome_1, ..., word_<max_submissions>, outcome_<max_submissions>

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["player", "root", "score", "submissions", "accepted", "ignored"]
    fields += REJECTION_COLUMNS + ["time_ms"]
    for i in range(1, max_submissions + 1):
        fields += [f"word_{i}", f"outcome_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "player": r.get("player_id", "?"),
                "root": r["root"],
                "score": r["score"],
                "submissions": r["submissions"],
                "accepted": r["accepted"],
                "ignored": r["ignored"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            rejected = r.get("rejected", {})
            for reason in RejectionReason:
                row[f"rejected_{reason.value}"] = rejected.get(reason.value, 0)

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_submissions + 1):
                if i <= len(hist):
                    word, outcome = hist[i - 1]
                    row[f"word_{i}"] = word
                    row[f"outcome_{i}"] = outcome
                else:
                    row[f"word_{i}"] = ""
                    row[f"outcome_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (player, oracle, paths, seed, sample, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

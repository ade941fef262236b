# apps/cli/run.py
"""
CLI entry point for word scramble simulations.

This script:
  1) Validates the start-word list and lexicon (counts + SHA, start ⊆ lexicon).
  2) Loads the lists, builds the dictionary oracle and the requested player.
  3) Plays one session per root word with a live progress indicator and writes:
       - CSV:  per-session results + submission/outcome history columns
       - JSON: manifest with config, wordlist hashes, score summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordscramble.config import DEFAULT_LANGUAGE, DEFAULT_LEXICON, DEFAULT_START_WORDS, GameConfig
from wordscramble.datasets import load_words, pretty_summary, validate_wordlists
from wordscramble.harness import run_case, summarize
from wordscramble.harness.core import DEFAULT_MAX_SUBMISSIONS
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.oracles import create_oracle, get_oracle_ids
from wordscramble.players import create_player, get_player_ids


def build_oracle(oracle_id: str, *, lexicon_path: str, language: str, timeout: float):
    """Construct an oracle from CLI flags (shared with run_multi)."""
    if oracle_id == "wordlist":
        return create_oracle("wordlist", paths={language: lexicon_path})
    if oracle_id == "remote":
        return create_oracle("remote", timeout=timeout)
    return create_oracle(oracle_id)


def choose_cases(roots, sample, seed):
    """Deterministic sample of roots without replacement (all roots if sample is None)."""
    if sample and sample < len(roots):
        pool = list(roots)
        random.Random(seed).shuffle(pool)
        return pool[:sample]
    return list(roots)


def progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def main(argv=None):
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="word scramble: run player simulations")
    ap.add_argument("--player", default="lexicon_greedy",
                    help=f"player id (one of: {', '.join(get_player_ids())})")
    ap.add_argument("--oracle", default="wordlist",
                    help=f"dictionary oracle id (one of: {', '.join(get_oracle_ids())})")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="root words, one per line")
    ap.add_argument("--lexicon", default=str(DEFAULT_LEXICON),
                    help="player vocabulary and wordlist-oracle dictionary")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE)
    ap.add_argument("--timeout", type=float, default=5.0, help="remote oracle timeout (seconds)")
    ap.add_argument("--max-submissions", type=int, default=DEFAULT_MAX_SUBMISSIONS,
                    help="submission budget per session")
    ap.add_argument("--sample", type=int, help="run only a subset of roots (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate wordlists and print a one-liner summary
    rep = validate_wordlists(args.start_words, args.lexicon)
    print(pretty_summary(rep))

    # 2) Load lists and build collaborators
    roots = load_words(args.start_words)
    lexicon = load_words(args.lexicon)
    oracle = build_oracle(args.oracle, lexicon_path=args.lexicon, language=args.language,
                          timeout=args.timeout)
    player = create_player(args.player)
    config = GameConfig(language=args.language)

    # 3) Choose cases
    cases = choose_cases(roots, args.sample, args.seed)
    total = len(cases)

    mode = progress_mode(args.progress)
    iterator = tqdm(cases, ncols=80, desc="Running", unit="session") if mode == "bar" else cases

    # 4) Run batch with live progress
    results = []
    start = time.time()
    last_print = 0.0
    for idx, root in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223
        r = run_case(player, root, oracle=oracle, lexicon=lexicon,
                     max_submissions=args.max_submissions, config=config, seed=per_seed)
        r["player_id"] = player.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    oracle.close()

    # 5) Write outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_submissions=args.max_submissions)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "player_id": player.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"mean={summary['mean']} median={summary['median']} p90={summary['p90']} "
          f"max={summary['max']} acceptance={summary['acceptance_rate']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

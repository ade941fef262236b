# apps/cli/run_multi.py
"""
Run multiple players in one shot with shared sampling and progress.

Writes per-player outputs to: <outdir>/<player_id>/run_<timestamp>.csv + _manifest.json
and prints one summary line per player.
"""

from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from wordscramble.config import DEFAULT_LANGUAGE, DEFAULT_LEXICON, DEFAULT_START_WORDS, GameConfig
from wordscramble.datasets import load_words, pretty_summary, validate_wordlists
from wordscramble.harness import run_case, summarize
from wordscramble.harness.core import DEFAULT_MAX_SUBMISSIONS
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.oracles.base import BaseOracle
from wordscramble.players import create_player, get_player_ids

from apps.cli.run import build_oracle, choose_cases, progress_mode


def _run_one_player(player_id: str, cases: List[str], *, oracle: BaseOracle, lexicon: List[str],
                    config: GameConfig, max_submissions: int, base_seed: int, outdir: Path,
                    progress: str, wordlists: Dict) -> Tuple[str, str, Dict]:
    player = create_player(player_id)
    mode = progress_mode(progress)
    iterator = tqdm(cases, ncols=80, desc=player_id, unit="session") if mode == "bar" else cases

    results = []
    for idx, root in enumerate(iterator, 1):
        per_seed = base_seed + idx * 2654435761
        r = run_case(player, root, oracle=oracle, lexicon=lexicon,
                     max_submissions=max_submissions, config=config, seed=per_seed)
        r["player_id"] = player.id
        results.append(r)
        if mode == "plain":
            sys.stderr.write(f"\r[{player_id}] {idx}/{len(cases)}")
            sys.stderr.flush()
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # write outputs under <outdir>/<player_id>/
    summary = summarize(results)
    run_id = timestamp_id()
    pdir = outdir / player_id
    pdir.mkdir(parents=True, exist_ok=True)
    csv_path = pdir / f"run_{run_id}.csv"
    manifest_path = pdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_submissions=max_submissions)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {"player": player_id, "language": config.language, "seed": base_seed,
                   "max_submissions": max_submissions, "num_cases": len(cases)},
        "wordlists": wordlists,
        "num_cases": len(results),
        "player_id": player.id,
        "summary": summary,
    }, str(manifest_path))
    return str(csv_path), str(manifest_path), summary


def main(argv=None):
    registered = get_player_ids()
    ap = argparse.ArgumentParser(description="word scramble: run many players at once")
    ap.add_argument("--players", nargs="+", required=True,
                    help=f"list of player ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="player ids to skip (only if --players ALL)")
    ap.add_argument("--oracle", default="wordlist")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS))
    ap.add_argument("--lexicon", default=str(DEFAULT_LEXICON))
    ap.add_argument("--language", default=DEFAULT_LANGUAGE)
    ap.add_argument("--timeout", type=float, default=5.0)
    ap.add_argument("--max-submissions", type=int, default=DEFAULT_MAX_SUBMISSIONS)
    ap.add_argument("--sample", type=int)
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) validate once
    rep = validate_wordlists(args.start_words, args.lexicon)
    print(pretty_summary(rep))

    # 2) load lists and shared collaborators once
    roots = load_words(args.start_words)
    lexicon = load_words(args.lexicon)
    oracle = build_oracle(args.oracle, lexicon_path=args.lexicon, language=args.language,
                          timeout=args.timeout)
    config = GameConfig(language=args.language)

    # 3) shared cases (deterministic by seed)
    cases = choose_cases(roots, args.sample, args.seed)

    # 4) expand players
    if len(args.players) == 1 and args.players[0].lower() == "all":
        todo = [p for p in registered if p not in set(args.exclude)]
    else:
        todo = args.players
        missing = [p for p in todo if p not in registered]
        if missing:
            raise SystemExit(f"Unknown player ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 5) run each player sequentially (shared cases)
    for pid in todo:
        if args.progress != "off":
            print(f"\n=== Running {pid} on {len(cases)} roots ===")
        csv_path, manifest_path, summary = _run_one_player(
            pid, cases, oracle=oracle, lexicon=lexicon, config=config,
            max_submissions=args.max_submissions, base_seed=args.seed, outdir=outdir,
            progress=args.progress, wordlists=rep,
        )
        print(f"{pid}: mean={summary['mean']} max={summary['max']} "
              f"acceptance={summary['acceptance_rate']}")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    oracle.close()


if __name__ == "__main__":
    main()

# apps/cli/play.py
"""
Interactive terminal word scramble.

This script:
  1) Builds a word list provider (start words) and a dictionary oracle.
  2) Starts a session and shows the root word.
  3) Reads one word per line and reports the outcome:
       - accepted words print the running score
       - rejections print their title and message
       - trivial words (too short, or the root itself) are silently skipped
  4) Commands: ":restart" picks a new root, ":words" lists accepted words,
     ":quit" (or EOF) exits.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordscramble.config import DEFAULT_LANGUAGE, DEFAULT_LEXICON, DEFAULT_START_WORDS, GameConfig
from wordscramble.datasets import FileWordListProvider
from wordscramble.engine import GameSession
from wordscramble.errors import Accepted, Rejected, StartupFailure
from wordscramble.oracles import get_oracle_ids

from apps.cli.run import build_oracle


def _show_root(root: str) -> None:
    print(f"\n=== {root} ===")
    print("Enter your word (:restart, :words, :quit)")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="word scramble: play in the terminal")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="root words, one per line")
    ap.add_argument("--oracle", default="wordlist",
                    help=f"dictionary oracle id (one of: {', '.join(get_oracle_ids())})")
    ap.add_argument("--lexicon", default=str(DEFAULT_LEXICON),
                    help="dictionary file for the wordlist oracle")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="language tag for the oracle")
    ap.add_argument("--timeout", type=float, default=5.0, help="remote oracle timeout (seconds)")
    ap.add_argument("--seed", type=int, help="RNG seed for root word choice")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    provider = FileWordListProvider(args.start_words, seed=args.seed)
    oracle = build_oracle(args.oracle, lexicon_path=args.lexicon, language=args.language,
                          timeout=args.timeout)
    session = GameSession(provider, oracle, GameConfig(language=args.language))

    try:
        return _play(session)
    finally:
        oracle.close()


def _play(session: GameSession) -> int:
    try:
        _show_root(session.start())
    except StartupFailure as e:
        print(f"Could not start a game: {e}", file=sys.stderr)
        return 1

    for line in sys.stdin:
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":restart":
            _show_root(session.start())
            continue
        if cmd == ":words":
            for w in session.used_words:
                print(f"  ({len(w)}) {w}")
            continue

        result = session.submit(cmd)
        if isinstance(result, Accepted):
            print(f"+{len(result.word)}  Your score is {result.score}")
        elif isinstance(result, Rejected):
            print(f"{result.title}: {result.message}")

    print(f"Final score: {session.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

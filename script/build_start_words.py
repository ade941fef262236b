"""
Turn a raw word list into a clean start-word (root word) list.

Features:
- Trims, lowercases and drops blank or non-alphabetic lines.
- Keeps only words within --min-len/--max-len (roots are usually 8 letters).
- Optional --lexicon: keep only roots that the dictionary itself recognizes.
- Removes duplicates, preserving original order (or --sort alphabetically).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.build_start_words --in raw_words.txt \
        --out wordscramble/datasets/data/start.txt --min-len 8 --max-len 8
"""

import argparse
from pathlib import Path

from wordscramble.datasets.io import load_words, write_lines


def unique_preserve_order(words):
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def build(words, *, min_len: int, max_len: int | None, lexicon=None, sort: bool = False):
    out = [w for w in words if len(w) >= min_len and (max_len is None or len(w) <= max_len)]
    if lexicon is not None:
        known = set(lexicon)
        out = [w for w in out if w in known]
    out = unique_preserve_order(out)
    return sorted(out) if sort else out


def main():
    ap = argparse.ArgumentParser(description="Build a clean start-word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--min-len", type=int, default=8)
    ap.add_argument("--max-len", type=int, default=8)
    ap.add_argument("--lexicon", help="only keep words present in this dictionary file")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    words = load_words(inp)
    lexicon = load_words(args.lexicon) if args.lexicon else None
    out = build(words, min_len=args.min_len, max_len=args.max_len, lexicon=lexicon, sort=args.sort)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(words)} words) -> Output: {outp} ({len(out)} roots)")


if __name__ == "__main__":
    main()

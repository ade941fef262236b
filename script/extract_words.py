"""
Scrape words from an HTML word-list page and write a clean list.

What it does:
- Downloads the page.
- Parses visible text (optionally only inside elements matching --selector).
- Extracts alphabetic tokens within the length bounds.
- Lowercases, de-duplicates while preserving page order, and writes to file.

Usage:
    python -m script.extract_words --url https://example.org/eight-letter-words \
        --selector "ul.words li" --min-len 8 --max-len 8 --out raw_words.txt
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

WORD_RE = re.compile(r"\b[A-Za-z]+\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(html: str, *, selector: str | None = None, min_len: int = 3,
                  max_len: int | None = None) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    nodes = soup.select(selector) if selector else [soup]
    text = "\n".join(n.get_text("\n", strip=True) for n in nodes)
    words = [m.group(0).lower() for m in WORD_RE.finditer(text)]
    words = [w for w in words if len(w) >= min_len and (max_len is None or len(w) <= max_len)]
    return unique_preserve_order(words)


def fetch_words(url: str, **kwargs) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, **kwargs)


def main():
    ap = argparse.ArgumentParser(description="Extract words from an HTML word-list page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--selector", help="CSS selector of the elements holding the words")
    ap.add_argument("--min-len", type=int, default=3)
    ap.add_argument("--max-len", type=int)
    ap.add_argument("--out", default="raw_words.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of page order")
    args = ap.parse_args()

    words = fetch_words(args.url, selector=args.selector, min_len=args.min_len, max_len=args.max_len)
    if args.sort:
        words = sorted(set(words))

    Path(args.out).write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()

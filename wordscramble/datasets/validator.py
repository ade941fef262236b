"""
Dataset validator for word scramble.

What this module does:
- Validate a start-word list (root words, one per line) and optionally the
  lexicon used by the word-list dictionary oracle.
- Enforce formatting rules (lowercase, a–z only, length bounds, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that every start word is itself in the lexicon (roots should be real words).
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("wordscramble/datasets/data/start.txt",
                             "wordscramble/datasets/data/lexicon_en.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from wordscramble.config import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the start list (and optional lexicon)."""
    min_length: int
    max_length: Optional[int]
    start: FileReport
    lexicon: Optional[FileReport]
    start_subset_lexicon: Optional[bool]  # None when no lexicon was given
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int, max_length: Optional[int]) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line, already lowercase a–z
      - min_length <= len <= max_length (no upper bound when max_length is None)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            too_long = max_length is not None and len(w) > max_length
            if w == w.lower() and w.isalpha() and len(w) >= min_length and not too_long:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def _missing_report(path: str) -> FileReport:
    return FileReport(path, False, 0, "", 0, 0)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(
        start_path: str,
        lexicon_path: Optional[str] = None,
        *,
        min_length: int = MIN_WORD_LENGTH,
        max_length: Optional[int] = None,
) -> Dict:
    """
    Validate a start-word list and, if given, the dictionary lexicon.

    Parameters
    ----------
    start_path : str
        Root words, one per line.
    lexicon_path : str, optional
        Dictionary words, one per line (any length >= 1).
    min_length, max_length : int
        Length bounds for root words.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport. `passed` requires a non-empty start
        list with no invalid lines and, when a lexicon is given, a readable
        lexicon containing every start word. Duplicates are reported as issues
        but do not fail validation.
    """
    issues: List[str] = []
    start_p = Path(start_path)
    lex_p = Path(lexicon_path) if lexicon_path else None

    if not start_p.exists():
        issues.append(f"start file not found: {start_path}")
    if lex_p is not None and not lex_p.exists():
        issues.append(f"lexicon file not found: {lexicon_path}")
    # Early return if either file is missing
    if issues:
        if start_p.exists():
            start_report = _file_report(start_p, *_load_and_check(start_p, min_length, max_length))
        else:
            start_report = _missing_report(start_path)
        rep = ValidationReport(
            min_length=min_length,
            max_length=max_length,
            start=start_report,
            lexicon=_missing_report(lexicon_path) if lex_p is not None else None,
            start_subset_lexicon=False if lex_p is not None else None,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    start_words, start_invalid = _load_and_check(start_p, min_length, max_length)
    start_report = _file_report(start_p, start_words, start_invalid)

    if start_report.count == 0:
        issues.append("start file contains 0 valid words")
    if start_invalid:
        issues.append(f"start has {start_invalid} invalid line(s)")
    if start_report.count != start_report.unique_count:
        issues.append("start contains duplicate lines")

    lex_report = None
    subset_ok: Optional[bool] = None
    if lex_p is not None:
        lex_words, lex_invalid = _load_and_check(lex_p, 1, None)
        lex_report = _file_report(lex_p, lex_words, lex_invalid)
        if lex_report.count == 0:
            issues.append("lexicon file contains 0 valid words")
        if lex_invalid:
            issues.append(f"lexicon has {lex_invalid} invalid line(s)")

        missing = sorted(set(start_words) - set(lex_words))
        subset_ok = not missing
        if missing:
            # a few examples are enough to debug
            issues.append(f"start words not in lexicon (e.g., {missing[:5]})")

    passed = (
            start_report.count > 0
            and start_invalid == 0
            and (lex_report is None or (lex_report.count > 0 and bool(subset_ok)))
    )

    rep = ValidationReport(
        min_length=min_length,
        max_length=max_length,
        start=start_report,
        lexicon=lex_report,
        start_subset_lexicon=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=120 (uniq=120, sha=abc123...) | lexicon=9800 (uniq=9800, sha=def456...) | start⊆lexicon=True | OK
    """
    s = report["start"]
    status = "OK" if report["passed"] else "FAIL"
    parts = [f"start={s['count']} (uniq={s['unique_count']}, sha={(s.get('sha256') or '')[:12]})"]
    lex = report.get("lexicon")
    if lex is not None:
        parts.append(f"lexicon={lex['count']} (uniq={lex['unique_count']}, sha={(lex.get('sha256') or '')[:12]})")
        parts.append(f"start⊆lexicon={report['start_subset_lexicon']}")
    parts.append(status)
    return " | ".join(parts)

from pathlib import Path

from wordscramble.config import DEFAULT_LEXICON, DEFAULT_START_WORDS
from wordscramble.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    start = tmp_path / "start.txt"
    lex = tmp_path / "lexicon_en.txt"
    _write(start, ["silkworm", "attention"])
    _write(lex, ["silkworm", "attention", "silk", "note", "tone"])

    rep = validate_wordlists(str(start), str(lex))
    assert rep["passed"] is True
    assert rep["start_subset_lexicon"] is True
    assert rep["start"]["count"] == 2
    s = pretty_summary(rep)
    assert "start=2" in s and "start⊆lexicon=True" in s and s.endswith("OK")


def test_validate_wordlists_without_lexicon(tmp_path: Path):
    start = tmp_path / "start.txt"
    _write(start, ["silkworm"])
    rep = validate_wordlists(str(start))
    assert rep["passed"] is True
    assert rep["lexicon"] is None
    assert "lexicon" not in pretty_summary(rep)


def test_validate_wordlists_flags_errors(tmp_path: Path):
    start = tmp_path / "start.txt"
    # blank line, uppercase, non-alpha and too short are all invalid
    start.write_text("silkworm\n\nAttention\nno-way\nab\nsilkworm\n", encoding="utf-8")

    rep = validate_wordlists(str(start))
    assert rep["passed"] is False
    assert rep["start"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_length_bounds(tmp_path: Path):
    start = tmp_path / "start.txt"
    _write(start, ["silkworm", "attention"])
    rep = validate_wordlists(str(start), min_length=8, max_length=8)
    assert rep["start"]["count"] == 1
    assert rep["passed"] is False


def test_validate_wordlists_subset_violation(tmp_path: Path):
    start = tmp_path / "start.txt"
    lex = tmp_path / "lexicon_en.txt"
    _write(start, ["silkworm", "attention"])
    _write(lex, ["silkworm", "silk"])  # missing 'attention'

    rep = validate_wordlists(str(start), str(lex))
    assert rep["passed"] is False
    assert rep["start_subset_lexicon"] is False
    assert any("not in lexicon" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_files(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "start.txt"), str(tmp_path / "lex.txt"))
    assert rep["passed"] is False
    assert rep["start"]["exists"] is False
    assert len(rep["issues"]) == 2


def test_bundled_data_is_valid():
    rep = validate_wordlists(str(DEFAULT_START_WORDS), str(DEFAULT_LEXICON))
    assert rep["passed"] is True, rep["issues"]

import csv
import json
from pathlib import Path

import pytest

from apps.cli import run, run_multi
from wordscramble.oracles.remote import RemoteDictionaryOracle
from wordscramble.oracles.wordlist import WordListOracle

ROOTS = ["silkworm", "attention", "notebook"]
LEXICON = ROOTS + ["silk", "worm", "milk", "owl", "note", "tone", "ant", "book", "boot"]


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _lists(tmp_path: Path):
    start = tmp_path / "start.txt"
    lex = tmp_path / "lexicon_en.txt"
    _write(start, ROOTS)
    _write(lex, LEXICON)
    return start, lex


def _rows(csv_path: Path):
    with csv_path.open(newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def test_choose_cases_is_deterministic():
    roots = [f"root{i}" for i in range(10)]
    a = run.choose_cases(roots, 4, seed=5)
    assert a == run.choose_cases(roots, 4, seed=5)
    assert len(a) == 4 and set(a) <= set(roots)
    assert run.choose_cases(roots, None, seed=5) == roots
    assert run.choose_cases(roots, 50, seed=5) == roots


def test_build_oracle_by_id(tmp_path: Path):
    _, lex = _lists(tmp_path)
    local = run.build_oracle("wordlist", lexicon_path=str(lex), language="en", timeout=1.0)
    assert isinstance(local, WordListOracle)
    assert local.is_recognized_word("silk") is True

    remote = run.build_oracle("remote", lexicon_path=str(lex), language="en", timeout=2.5)
    assert isinstance(remote, RemoteDictionaryOracle)
    assert remote.timeout == 2.5
    remote.close()

    with pytest.raises(ValueError):
        run.build_oracle("nope", lexicon_path=str(lex), language="en", timeout=1.0)


def test_run_writes_csv_and_manifest(tmp_path: Path, capsys):
    start, lex = _lists(tmp_path)
    outdir = tmp_path / "reports"
    run.main(["--start-words", str(start), "--lexicon", str(lex), "--outdir", str(outdir),
              "--progress", "off", "--player", "lexicon_greedy"])

    csvs = list(outdir.glob("run_*.csv"))
    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1

    rows = _rows(csvs[0])
    assert sorted(r["root"] for r in rows) == sorted(ROOTS)
    assert all(r["player"] == "lexicon_greedy" for r in rows)

    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 3
    assert manifest["player_id"] == "lexicon_greedy"
    assert manifest["wordlists"]["passed"] is True
    assert "Wrote:" in capsys.readouterr().out


def test_run_sample_limits_cases(tmp_path: Path):
    start, lex = _lists(tmp_path)
    outdir = tmp_path / "reports"
    run.main(["--start-words", str(start), "--lexicon", str(lex), "--outdir", str(outdir),
              "--progress", "off", "--sample", "2", "--seed", "7"])
    (csv_path,) = outdir.glob("run_*.csv")
    rows = _rows(csv_path)
    assert len(rows) == 2
    assert [r["root"] for r in rows] == run.choose_cases(ROOTS, 2, 7)


def test_run_multi_all_with_exclude(tmp_path: Path):
    start, lex = _lists(tmp_path)
    outdir = tmp_path / "batch"
    run_multi.main(["--players", "ALL", "--exclude", "letter_shuffle",
                    "--start-words", str(start), "--lexicon", str(lex),
                    "--outdir", str(outdir), "--progress", "off", "--max-submissions", "5"])

    ran = sorted(p.name for p in outdir.iterdir() if p.is_dir())
    assert ran == ["lexicon_greedy", "lexicon_random"]
    for pid in ran:
        (csv_path,) = (outdir / pid).glob("run_*.csv")
        assert len(_rows(csv_path)) == len(ROOTS)
        assert len(list((outdir / pid).glob("run_*_manifest.json"))) == 1


def test_run_multi_unknown_player(tmp_path: Path):
    start, lex = _lists(tmp_path)
    with pytest.raises(SystemExit, match="Unknown player ids"):
        run_multi.main(["--players", "lexicon_greedy", "nope",
                        "--start-words", str(start), "--lexicon", str(lex),
                        "--outdir", str(tmp_path / "batch"), "--progress", "off"])

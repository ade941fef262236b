import io
from pathlib import Path

from apps.cli import play


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_play_session_transcript(tmp_path: Path, monkeypatch, capsys):
    start = tmp_path / "start.txt"
    lex = tmp_path / "lexicon_en.txt"
    _write(start, ["attention"])
    _write(lex, ["attention", "note", "tone"])

    monkeypatch.setattr("sys.stdin", io.StringIO("note\nNOTE\nzebra\ntnet\nat\n:words\n:quit\n"))
    code = play.main(["--start-words", str(start), "--lexicon", str(lex)])
    out = capsys.readouterr().out

    assert code == 0
    assert "=== attention ===" in out
    assert "Your score is 4" in out
    assert "Word used already: Be more original" in out
    assert "Word not possible: You can't spell that word from 'attention'!" in out
    assert "Word not recognized" in out
    assert "(4) note" in out
    assert "Final score: 4" in out


def test_play_fails_fast_without_start_words(tmp_path: Path, monkeypatch, capsys):
    empty = tmp_path / "start.txt"
    empty.write_text("\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    code = play.main(["--start-words", str(empty)])
    assert code == 1
    assert "Could not start a game" in capsys.readouterr().err

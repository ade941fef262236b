import csv
import json
from pathlib import Path

import pytest

from wordscramble.config import GameConfig
from wordscramble.harness import run_case, run_batch, summarize, write_csv, write_manifest
from wordscramble.oracles import create_oracle
from wordscramble.players import create_player

LEXICON = ["silkworm", "silk", "worm", "milk", "slow", "owl", "attention", "note", "tone", "ant"]


def _oracle():
    return create_oracle("wordlist", words=LEXICON)


def test_run_case_smoke():
    player = create_player("lexicon_greedy")
    r = run_case(player, "silkworm", oracle=_oracle(), lexicon=LEXICON, seed=42)
    assert "score" in r and "history" in r
    # silk + worm + milk + slow + owl
    assert r["score"] == 4 + 4 + 4 + 4 + 3
    assert r["accepted"] == 5 and r["rejected"] == {}
    assert r["used_words"][-1] in {"silk", "worm", "milk", "slow"}  # longest submitted first


def test_run_case_passes_min_length_to_player():
    player = create_player("lexicon_greedy")
    r = run_case(player, "silkworm", oracle=_oracle(), lexicon=LEXICON,
                 config=GameConfig(min_length=4), seed=42)
    assert r["ignored"] == 0
    assert "owl" not in r["used_words"]
    assert r["score"] == 16


def test_run_case_records_rejections():
    player = create_player("lexicon_random")
    r = run_case(player, "silkworm", oracle=_oracle(), lexicon=LEXICON, max_submissions=20, seed=1)
    assert r["submissions"] == 20
    # the pool has 6 words (root included), so 20 draws must repeat
    assert r["rejected"].get("duplicate_word", 0) + r["ignored"] > 0
    assert r["score"] == sum(len(w) for w in r["used_words"])


def test_run_case_rejects_bad_budget():
    with pytest.raises(ValueError):
        run_case(create_player("letter_shuffle"), "silkworm", oracle=_oracle(), lexicon=LEXICON,
                 max_submissions=0)


def test_run_batch_and_summarize():
    player = create_player("lexicon_greedy")
    results = run_batch(player, ["silkworm", "attention"], oracle=_oracle(), lexicon=LEXICON, seed=3)
    assert [r["root"] for r in results] == ["silkworm", "attention"]
    stats = summarize(results)
    assert stats["sessions"] == 2
    assert stats["max"] == 19
    assert stats["acceptance_rate"] == 1.0


def test_summarize_empty():
    assert summarize([])["sessions"] == 0


def test_write_csv_and_manifest(tmp_path: Path):
    player = create_player("lexicon_greedy")
    r = run_case(player, "attention", oracle=_oracle(), lexicon=LEXICON, max_submissions=5)
    r["player_id"] = player.id
    csv_path = write_csv([r], str(tmp_path / "out" / "run.csv"), max_submissions=5)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["player"] == "lexicon_greedy"
    assert rows[0]["root"] == "attention"
    assert rows[0]["outcome_1"] == "accepted"
    assert rows[0]["word_5"] == ""

    m = write_manifest({"run_id": "x", "summary": summarize([r])}, str(tmp_path / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8"))["summary"]["sessions"] == 1

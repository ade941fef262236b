from pathlib import Path

import pytest

from wordscramble import GameSession, SessionState
from wordscramble.config import DEFAULT_START_WORDS
from wordscramble.datasets import FileWordListProvider, StaticWordListProvider
from wordscramble.errors import StartupFailure
from wordscramble.oracles.wordlist import WordListOracle


def test_file_provider_filters_blank_and_non_alpha(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\n\n  \nattention\nnot-a-word\n42\n", encoding="utf-8")
    provider = FileWordListProvider(p, seed=1)
    assert provider.words() == ["silkworm", "attention"]
    assert provider.pick_random_word() in {"silkworm", "attention"}
    assert len(provider) == 2


def test_file_provider_missing_file(tmp_path: Path):
    provider = FileWordListProvider(tmp_path / "nope.txt")
    with pytest.raises(StartupFailure):
        provider.pick_random_word()


def test_file_provider_empty_file(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\n\n", encoding="utf-8")
    with pytest.raises(StartupFailure):
        FileWordListProvider(p).pick_random_word()


def test_static_provider_is_seeded():
    words = ["silkworm", "attention", "generate", "notebook", "painters"]
    a = [StaticWordListProvider(words, seed=7).pick_random_word() for _ in range(3)]
    b = [StaticWordListProvider(words, seed=7).pick_random_word() for _ in range(3)]
    assert a == b


def test_static_provider_empty_pool():
    with pytest.raises(StartupFailure):
        StaticWordListProvider(["", "  "]).pick_random_word()


def test_bundled_start_words_load():
    provider = FileWordListProvider(DEFAULT_START_WORDS)
    assert "silkworm" in provider.words()


def test_file_provider_undecodable_file(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_bytes(b"attention\n\xff\xfe\n")
    with pytest.raises(StartupFailure):
        FileWordListProvider(p).pick_random_word()


def test_session_start_with_undecodable_file_stays_idle(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_bytes(b"attention\n\xff\xfe\n")
    session = GameSession(FileWordListProvider(p), WordListOracle(words=["note"]))
    with pytest.raises(StartupFailure):
        session.start()
    assert session.state is SessionState.IDLE
    assert session.root_word is None


def test_static_provider_drops_non_alpha_words():
    assert StaticWordListProvider(["no-way", " Attention ", "42"]).words() == ["attention"]
    with pytest.raises(StartupFailure):
        StaticWordListProvider(["no-way"]).pick_random_word()

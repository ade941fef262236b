import pytest

from wordscramble.engine import can_form
from wordscramble.players import create_player, get_player_ids

LEXICON = ["silkworm", "silk", "worm", "milk", "slow", "owl", "ox", "attention", "note"]


def test_registry_lists_builtin_players():
    assert get_player_ids() == ["letter_shuffle", "lexicon_greedy", "lexicon_random"]


def test_create_player_unknown_id():
    with pytest.raises(ValueError, match="Unknown player id"):
        create_player("nope")


def test_lexicon_greedy_longest_first_then_exhausts():
    p = create_player("lexicon_greedy")
    p.reset(root="silkworm", lexicon=LEXICON)
    words = []
    while (w := p.next_word({})) is not None:
        words.append(w)
    assert words == ["silk", "worm", "milk", "slow", "owl"]


def test_lexicon_greedy_honours_min_length():
    p = create_player("lexicon_greedy")
    p.reset(root="silkworm", lexicon=LEXICON, min_length=4)
    words = []
    while (w := p.next_word({})) is not None:
        words.append(w)
    assert words == ["silk", "worm", "milk", "slow"]


def test_lexicon_random_is_seeded_and_composable():
    a, b = create_player("lexicon_random"), create_player("lexicon_random")
    a.reset(root="silkworm", lexicon=LEXICON, seed=9)
    b.reset(root="silkworm", lexicon=LEXICON, seed=9)
    wa = [a.next_word({}) for _ in range(10)]
    wb = [b.next_word({}) for _ in range(10)]
    assert wa == wb
    assert all(can_form(w, "silkworm") for w in wa)


def test_letter_shuffle_stays_within_root_letters():
    p = create_player("letter_shuffle")
    p.reset(root="attention", lexicon=[], seed=5)
    for _ in range(25):
        w = p.next_word({})
        assert 1 <= len(w) <= len("attention")
        assert can_form(w, "attention")


def test_players_give_up_without_a_root():
    for pid in get_player_ids():
        assert create_player(pid).next_word({}) is None

import pytest
from packages.engine import (
    Rejection, check_guess, derivable_words, is_possible, normalize, score_delta, session_score,
)
from packages.dictionaries import create_dictionary

WORDS = ["silk", "milk", "worm", "works", "slow", "lows", "owls", "skim", "milks"]


@pytest.fixture
def dictionary():
    return create_dictionary("wordlist", words=WORDS)


# --- subset-of-letters with multiplicity ---
@pytest.mark.parametrize("word,root,expected", [
    ("worm", "silkworm", True),
    ("milk", "silkworm", True),
    ("silkworm", "silkworm", True),
    ("eel", "bee", False),       # two 'e' available, no 'l'
    ("eel", "keel", True),
    ("keel", "kel", False),      # only one 'e'
    ("mirror", "silkworm", False),
    ("", "silkworm", True),
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected


def test_normalize_trims_and_lowercases():
    assert normalize(" Keel ") == "keel"
    assert normalize("\tWORM\n") == "worm"


def test_score_delta_and_session_score():
    assert score_delta("silky", 0) == 6
    assert score_delta("milk", 1) == 6
    assert session_score(["silky", "milk"]) == 12
    assert session_score([]) == 0
    with pytest.raises(ValueError):
        score_delta("milk", -1)


def test_derivable_words_filters_and_dedupes():
    vocab = ["Worm", "worm", "silkworm", "owl", "milk", "mirror", "", "slow"]
    assert derivable_words("silkworm", vocab) == ["worm", "milk", "slow"]


def test_check_guess_order(dictionary):
    root, used = "silkworm", ["milk"]
    assert check_guess("owl", root, used, dictionary) is Rejection.TOO_SHORT
    assert check_guess("silkworm", root, used, dictionary) is Rejection.SAME_AS_ROOT
    assert check_guess("milk", root, used, dictionary) is Rejection.ALREADY_USED
    assert check_guess("mirror", root, used, dictionary) is Rejection.NOT_POSSIBLE
    assert check_guess("wilk", root, used, dictionary) is Rejection.NOT_A_WORD
    assert check_guess("worm", root, used, dictionary) is None


def test_too_short_wins_over_everything(dictionary):
    # "sil" is neither a word nor used, but length is checked first
    assert check_guess("sil", "sil", [], dictionary) is Rejection.TOO_SHORT


def test_rejection_messages():
    assert Rejection.NOT_POSSIBLE.title == "Word not possible"
    assert Rejection.NOT_POSSIBLE.message("silkworm") == "You can't spell that word from 'silkworm'!"
    assert Rejection.ALREADY_USED.message() == "Be more original"

import random

import pytest
from packages.dictionaries import create_dictionary
from packages.engine import Rejection
from packages.game import Accepted, Rejected, SessionError, WordListError, WordValidator

WORDS = ["silk", "milk", "worm", "works", "slow", "lows", "owls", "skim", "silky", "keel", "eels"]


def _validator(root="silkworm", seed=1):
    v = WordValidator(create_dictionary("wordlist", words=WORDS), rng=random.Random(seed))
    v.start_session([root])
    return v


@pytest.mark.parametrize("guess", ["", "a", "ab", "owl", "  sil  ", "xyz"])
def test_short_guesses_rejected(guess):
    v = _validator()
    r = v.submit(guess)
    assert isinstance(r, Rejected) and r.reason is Rejection.TOO_SHORT


def test_root_word_is_never_valid():
    v = _validator()
    assert v.submit("silkworm").reason is Rejection.SAME_AS_ROOT
    assert v.submit(" SilkWorm ").reason is Rejection.SAME_AS_ROOT


def test_repeat_is_rejected_without_state_change():
    v = _validator()
    first = v.submit("worm")
    assert first == Accepted(word="worm", score_delta=5)
    score, words = v.score, v.accepted_words

    second = v.submit("WORM")
    assert isinstance(second, Rejected) and second.reason is Rejection.ALREADY_USED
    assert v.score == score and v.accepted_words == words


def test_multiplicity_rule():
    v = _validator(root="bees")
    assert v.submit("eels").reason is Rejection.NOT_POSSIBLE
    v = _validator(root="keels")
    assert isinstance(v.submit("eels"), Accepted)
    assert isinstance(v.submit("keel"), Accepted)


def test_unknown_word_rejected():
    v = _validator()
    r = v.submit("wilk")
    assert r.reason is Rejection.NOT_A_WORD and r.candidate == "wilk"
    assert v.score == 0 and v.accepted_words == []


def test_scoring_sequence():
    v = _validator(root="silkyworm")
    assert v.submit("silky").score_delta == 6
    assert v.submit("milk").score_delta == 6
    assert v.score == 12
    assert v.accepted_words == ["milk", "silky"]


def test_normalization_is_shared_by_every_check():
    v = _validator()
    r = v.submit(" Worm ")
    assert r == Accepted(word="worm", score_delta=5)
    assert v.submit("worm").reason is Rejection.ALREADY_USED


def test_start_session_resets_and_draws_from_list():
    v = _validator()
    v.submit("worm")
    words = ["silkworm", "keelsons", ""]
    for _ in range(20):
        root = v.start_session(words)
        assert root in ("silkworm", "keelsons")
        assert v.root_word == root
        assert v.score == 0 and v.accepted_words == []


def test_start_session_empty_list_is_fatal():
    v = WordValidator(create_dictionary("wordlist", words=WORDS))
    with pytest.raises(WordListError):
        v.start_session([])
    with pytest.raises(WordListError):
        v.start_session(None)
    with pytest.raises(WordListError):
        v.start_session(["", "  "])


def test_start_session_fallback_is_opt_in():
    v = WordValidator(create_dictionary("wordlist", words=WORDS))
    assert v.start_session([], fallback="Silkworm") == "silkworm"
    # A usable list always wins over the fallback
    assert v.start_session(["keelsons"], fallback="silkworm") == "keelsons"


def test_submit_before_start_raises():
    v = WordValidator(create_dictionary("wordlist", words=WORDS))
    assert v.started is False
    with pytest.raises(SessionError):
        v.submit("worm")


def test_callbacks_observe_changes():
    v = WordValidator(create_dictionary("wordlist", words=WORDS))
    events = []
    v.on_start(lambda root: events.append(("start", root)))
    v.on_accept(lambda w, d, s: events.append(("accept", w, d, s)))
    v.on_reject(lambda reason, c: events.append(("reject", reason, c)))

    v.start_session(["silkworm"])
    v.submit("milk")
    v.submit("milk")
    assert events == [
        ("start", "silkworm"),
        ("accept", "milk", 5, 5),
        ("reject", Rejection.ALREADY_USED, "milk"),
    ]


def test_seeded_root_selection_is_reproducible():
    words = ["absolute", "backpack", "bluebird", "brighten", "calendar"]
    d = create_dictionary("wordlist", words=WORDS)
    a = [WordValidator(d, rng=random.Random(7)).start_session(words) for _ in range(3)]
    assert len(set(a)) == 1

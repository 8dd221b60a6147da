import pytest
from packages.dictionaries import REGISTRY, BaseDictionary, create_dictionary, get_dictionary_ids, register


def test_registry_lists_backends():
    assert get_dictionary_ids() == ["wordfreq", "wordlist"]


def test_unknown_id_raises():
    with pytest.raises(ValueError, match="Unknown dictionary id"):
        create_dictionary("nope")


def test_register_requires_unique_id():
    class Nameless(BaseDictionary):
        id = ""

    with pytest.raises(ValueError):
        register(Nameless)

    class Clash(BaseDictionary):
        id = "wordlist"

    with pytest.raises(ValueError):
        register(Clash)
    assert REGISTRY["wordlist"].__name__ == "WordListDictionary"


def test_wordlist_case_insensitive(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("Silk\nworm\n\n", encoding="utf-8")
    d = create_dictionary("wordlist", path=p)
    assert len(d) == 2
    assert d.is_recognized_word("SILK")
    assert " worm " in d
    assert not d.is_recognized_word("")
    assert not d.is_recognized_word("milk")


def test_wordlist_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_dictionary("wordlist", path=tmp_path / "missing.txt")


def test_wordfreq_threshold():
    d = create_dictionary("wordfreq", min_zipf=2.5)
    assert d.is_recognized_word("worm")
    assert d.is_recognized_word("Milk")
    assert not d.is_recognized_word("wkrmz")
    assert not d.is_recognized_word("milk!")
    assert not d.is_recognized_word("")
    assert d.frequency("worm") >= 2.5

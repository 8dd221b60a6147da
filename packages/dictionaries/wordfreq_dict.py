"""
Frequency-threshold dictionary backed by the `wordfreq` package.

A word counts as "recognized" when its Zipf frequency in the configured
language reaches `min_zipf`. Zipf is log10 of occurrences per billion words:

  - 7   : "the", "and"
  - 4-5 : everyday words ("worm", "milk")
  - 2-3 : uncommon but real words
  - 0   : never seen (typos, made-up strings)

The default threshold of 2.5 keeps most real words and drops the long
tail of junk tokens found in web corpora.
"""

from __future__ import annotations

from functools import lru_cache

from wordfreq import zipf_frequency

from packages.game.settings import DEFAULT_LANGUAGE, DEFAULT_MIN_ZIPF
from .base import BaseDictionary, register


@lru_cache(maxsize=50000)
def _zipf(word: str, language: str) -> float:
    """Cached Zipf lookup."""
    return zipf_frequency(word, language)


@register
class WordFreqDictionary(BaseDictionary):
    id = "wordfreq"
    name = "wordfreq (Zipf threshold)"

    def __init__(self, *, language: str = DEFAULT_LANGUAGE, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.language = language
        self.min_zipf = float(min_zipf)

    def frequency(self, word: str) -> float:
        return _zipf(word.strip().lower(), self.language)

    def is_recognized_word(self, word: str) -> bool:
        w = word.strip().lower()
        # wordfreq tokenizes its input, so "milk!" would still score.
        if not w or not w.isalpha():
            return False
        return _zipf(w, self.language) >= self.min_zipf

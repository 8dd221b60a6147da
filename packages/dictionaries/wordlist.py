"""
Word-list dictionary.

Recognizes exactly the words of a static list (one per line when loaded
from a file). Lookups are case-insensitive and ignore surrounding
whitespace. Handy for offline play, tests and curated vocabularies.
"""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from packages.datasets.io import read_lines
from .base import BaseDictionary, register


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Static word list"

    def __init__(self, words: Optional[Iterable[str]] = None, *, path: Path | str | None = None):
        if path is not None:
            words = read_lines(path)
        self._words: FrozenSet[str] = frozenset(
            w.strip().lower() for w in (words or ()) if w.strip()
        )

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def is_recognized_word(self, word: str) -> bool:
        w = word.strip().lower()
        if not w:
            return False
        return w in self._words

"""
Session state and decision logic for one word-scramble game.

WordValidator owns:
  - root_word      : chosen once per session from the start-word list
  - accepted_words : accepted guesses, newest first
  - score          : running total (only ever grows within a session)

Hosts drive it through two explicit calls:
  - start_session(word_list)  -> picks a root, resets words and score
  - submit(raw_guess)         -> Accepted(word, score_delta) | Rejected(reason)

and observe it either by reading the properties or by registering callbacks
(on_start / on_accept / on_reject). A rejection never changes state.

The dictionary is injected: anything with is_recognized_word(str) -> bool.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Union

from packages.engine import Rejection, check_guess, normalize, score_delta
from .errors import SessionError, WordListError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Accepted:
    """Successful submit: the normalized word and the points it earned."""
    word: str
    score_delta: int


@dataclass(frozen=True)
class Rejected:
    """Failed submit: why, and the normalized candidate that was checked."""
    reason: Rejection
    candidate: str

    @property
    def title(self) -> str:
        return self.reason.title


SubmitResult = Union[Accepted, Rejected]


def clean_word_list(words: Iterable[str]) -> List[str]:
    """Normalize start words and drop blanks (a trailing newline is not a word)."""
    return [w for w in (normalize(x) for x in words) if w]


class WordValidator:
    def __init__(self, dictionary, *, rng: Optional[random.Random] = None):
        self.dictionary = dictionary
        self.rng = rng or random.Random()

        self._root_word: Optional[str] = None
        self._accepted: List[str] = []
        self._score: int = 0

        self._on_start: List[Callable[[str], None]] = []
        self._on_accept: List[Callable[[str, int, int], None]] = []
        self._on_reject: List[Callable[[Rejection, str], None]] = []

    # ---- read-only state ----

    @property
    def root_word(self) -> str:
        if self._root_word is None:
            raise SessionError("no session started; call start_session() first")
        return self._root_word

    @property
    def accepted_words(self) -> List[str]:
        """Copy of the accepted words, newest first."""
        return list(self._accepted)

    @property
    def score(self) -> int:
        return self._score

    @property
    def started(self) -> bool:
        return self._root_word is not None

    # ---- observers ----

    def on_start(self, fn: Callable[[str], None]) -> Callable[[str], None]:
        self._on_start.append(fn)
        return fn

    def on_accept(self, fn: Callable[[str, int, int], None]) -> Callable[[str, int, int], None]:
        self._on_accept.append(fn)
        return fn

    def on_reject(self, fn: Callable[[Rejection, str], None]) -> Callable[[Rejection, str], None]:
        self._on_reject.append(fn)
        return fn

    # ---- operations ----

    def start_session(self, word_list: Optional[Iterable[str]], *, fallback: Optional[str] = None) -> str:
        """
        Reset score and accepted words, then pick a root uniformly at random.

        Args:
          word_list : candidate root words (None means the source was unavailable)
          fallback  : root to use instead of failing when the list is empty

        Raises:
          WordListError if the list is empty/unavailable and no fallback is given.
        """
        words = clean_word_list(word_list) if word_list is not None else []

        if words:
            root = self.rng.choice(words)
        elif fallback:
            logger.warning("start word list unavailable; using fallback root %r", fallback)
            root = normalize(fallback)
        else:
            raise WordListError("could not load start words: list is empty or unavailable")

        self._score = 0
        self._accepted.clear()
        self._root_word = root
        logger.info("session started root=%s candidates=%d", root, len(words))

        for fn in self._on_start:
            fn(root)
        return root

    def submit(self, raw_guess: str) -> SubmitResult:
        """
        Validate `raw_guess` and, if acceptable, record it and credit its score.
        """
        root = self.root_word
        candidate = normalize(raw_guess)

        reason = check_guess(candidate, root, self._accepted, self.dictionary)
        if reason is not None:
            logger.debug("rejected %r: %s", candidate, reason.name)
            for fn in self._on_reject:
                fn(reason, candidate)
            return Rejected(reason=reason, candidate=candidate)

        delta = score_delta(candidate, len(self._accepted))
        self._accepted.insert(0, candidate)
        self._score += delta
        logger.debug("accepted %r +%d (score=%d)", candidate, delta, self._score)

        for fn in self._on_accept:
            fn(candidate, delta, self._score)
        return Accepted(word=candidate, score_delta=delta)

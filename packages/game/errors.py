"""Exceptions raised by the word-scramble game core."""


class WordScrambleError(Exception):
    """Base class for every error raised by this package."""


class WordListError(WordScrambleError):
    """The start-word list is missing, unreadable or has no usable words."""


class SessionError(WordScrambleError):
    """The validator was used before a session was started."""

from .errors import WordScrambleError, WordListError, SessionError
from .session import WordValidator, Accepted, Rejected, SubmitResult, clean_word_list

__all__ = [
    "WordValidator", "Accepted", "Rejected", "SubmitResult", "clean_word_list",
    "WordScrambleError", "WordListError", "SessionError",
]

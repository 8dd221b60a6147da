from .letters import normalize, is_possible, derivable_words
from .scoring import score_delta, session_score
from .validation import Rejection, check_guess

__all__ = [
    "normalize", "is_possible", "derivable_words",
    "score_delta", "session_score",
    "Rejection", "check_guess",
]

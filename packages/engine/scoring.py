"""
Score accounting for accepted words.

Rule:
  - an accepted word earns one point per letter
  - plus its 1-based acceptance rank within the session

So the Nth accepted word of length L is worth L + N. Totals are therefore
independent of the order words are found in:

  session_score(words) == sum(len(w) for w in words) + n * (n + 1) / 2
"""

from typing import Iterable


def score_delta(word: str, accepted_count: int) -> int:
    """
    Points credited for accepting `word` when `accepted_count` words were
    already accepted earlier in the session.

    Examples:
      score_delta("silky", 0) -> 6
      score_delta("milk", 1)  -> 6
    """
    if accepted_count < 0:
        raise ValueError(f"accepted_count must be >= 0; got {accepted_count}")
    return len(word) + accepted_count + 1


def session_score(words: Iterable[str]) -> int:
    """
    Total score for `words` accepted one after another in a fresh session.
    """
    total = 0
    for rank, w in enumerate(words):
        total += score_delta(w, rank)
    return total

"""
Guess validation for the word-scramble game.

This module answers the question: "Why would this guess be turned down?"
Checks run in a fixed order and the first failure wins:

  1. TOO_SHORT     : 3 letters or fewer (the rule is strictly > 3)
  2. SAME_AS_ROOT  : the guess is the root word itself
  3. ALREADY_USED  : accepted earlier in this session
  4. NOT_POSSIBLE  : letters cannot be drawn from the root (with multiplicity)
  5. NOT_A_WORD    : the dictionary oracle does not recognize it

The dictionary is only consulted after every cheap check passes, so remote
or slow backends see as few lookups as possible.
"""

from enum import Enum
from typing import Container, Optional

from .letters import is_possible

# Accepted words must be strictly longer than this.
MIN_LENGTH_EXCLUSIVE = 3


class Rejection(Enum):
    """Reason a guess was not accepted, with the text a host shows the player."""

    TOO_SHORT = ("Word too short", "Word must be greater than 3 characters...")
    SAME_AS_ROOT = ("Word same as rootword", "Word can't be the same as original word")
    ALREADY_USED = ("Word used already", "Be more original")
    NOT_POSSIBLE = ("Word not possible", "You can't spell that word from '{root}'!")
    NOT_A_WORD = ("Word not recognized", "You can't just make them up, you know!")

    @property
    def title(self) -> str:
        return self.value[0]

    def message(self, root: str = "") -> str:
        return self.value[1].format(root=root)


def check_guess(candidate: str, root: str, used: Container[str], dictionary) -> Optional[Rejection]:
    """
    Return the first Rejection that applies to `candidate`, or None if it is acceptable.

    Args:
      candidate  : normalized guess (lowercase, trimmed)
      root       : session root word
      used       : words accepted so far this session
      dictionary : object exposing is_recognized_word(word) -> bool
    """
    if len(candidate) <= MIN_LENGTH_EXCLUSIVE:
        return Rejection.TOO_SHORT

    if candidate == root:
        return Rejection.SAME_AS_ROOT

    if candidate in used:
        return Rejection.ALREADY_USED

    if not is_possible(candidate, root):
        return Rejection.NOT_POSSIBLE

    if not dictionary.is_recognized_word(candidate):
        return Rejection.NOT_A_WORD

    return None

"""
Subset-of-letters checks against a root word.

A candidate is "possible" from a root iff every letter of the candidate can
be drawn from the root's letters, respecting multiplicity:

  - walk the candidate left to right
  - remove one matching letter from a mutable copy of the root
  - fail as soon as a letter is no longer available

Examples:
  is_possible("worm", "silkworm")  -> True
  is_possible("eel", "bee")        -> False   (no 'l' in "bee")
  is_possible("keel", "kel")       -> False   (only one 'e' in "kel")
"""

from typing import Iterable, List


def normalize(raw: str) -> str:
    """
    Canonical form of player input: surrounding whitespace trimmed, lowercase.
    """
    return raw.strip().lower()


def is_possible(word: str, root: str) -> bool:
    """
    Return True if `word` can be spelled from the letters of `root`.

    Both arguments are expected to be normalized already.
    """
    remaining = list(root)

    for letter in word:
        # Consume one instance; a letter used up earlier is gone for good.
        try:
            remaining.remove(letter)
        except ValueError:
            return False

    return True


def derivable_words(root: str, vocabulary: Iterable[str], min_length: int = 4) -> List[str]:
    """
    Words from `vocabulary` that could be accepted against `root` ignoring
    the dictionary and already-used checks.

    Args:
      root       : the session's root word
      vocabulary : iterable of candidate words (any case, may contain blanks)
      min_length : shortest length to keep (accepted words are longer than 3)

    Returns:
      List[str] of unique normalized words (order of first appearance).
    """
    root = normalize(root)
    out: List[str] = []
    seen = set()

    for w in vocabulary:
        w = normalize(w)
        if len(w) < min_length or w == root or w in seen:
            continue
        if is_possible(w, root):
            seen.add(w)
            out.append(w)

    return out

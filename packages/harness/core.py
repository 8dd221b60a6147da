"""
Offline analysis primitives.

- run_case:  play one root word to exhaustion against a vocabulary.
- run_batch: run many root words in sequence (optionally a sample prefix).

A "case" starts a real WordValidator session pinned to the given root and
submits every vocabulary word derivable from it, so the numbers reported
are exactly what a perfect player could score with that dictionary.

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or a future service without changes.
"""

from __future__ import annotations
import random
import time
from collections import Counter
from typing import Dict, Iterable, List

from packages.engine import derivable_words
from packages.game import Accepted, WordValidator


def run_case(
        root: str,
        *,
        vocabulary: Iterable[str],
        dictionary,
        seed: int | None = None,
) -> Dict:
    """
    Submit every derivable vocabulary word for `root` and record the outcome.

    Args:
        root:       the root word to analyse
        vocabulary: candidate words to try (typically a large word list)
        dictionary: oracle passed to the validator (is_recognized_word)
        seed:       RNG seed for the submission order

    Returns:
        dict with keys:
            root (str), accepted (int), score (int), time_ms (float),
            words (list[str], newest first), rejections (dict reason -> count)
    """
    rng = random.Random(seed)
    validator = WordValidator(dictionary, rng=rng)
    validator.start_session([root])

    # Submission order does not change the total, only which word gets which rank
    pool = derivable_words(root, vocabulary)
    rng.shuffle(pool)

    rejections: Counter = Counter()
    t0 = time.perf_counter_ns()
    for w in pool:
        result = validator.submit(w)
        if not isinstance(result, Accepted):
            rejections[result.reason.name] += 1
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "root": validator.root_word,
        "accepted": len(validator.accepted_words),
        "score": validator.score,
        "time_ms": dt,
        "words": validator.accepted_words,
        "rejections": dict(rejections),
    }


def run_batch(
        roots: List[str],
        *,
        vocabulary: Iterable[str],
        dictionary,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K roots
    are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index).
    """
    vocab = list(vocabulary)
    pool = roots[:sample] if sample is not None else list(roots)

    out: List[Dict] = []
    for idx, root in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(root, vocabulary=vocab, dictionary=dictionary, seed=case_seed))
    return out

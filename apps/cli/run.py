# apps/cli/run.py
"""
CLI entry point for root-word analysis runs.

This script:
  1) Validates the start-word list (prints counts + SHA).
  2) Loads the start words and a vocabulary, and instantiates the dictionary.
  3) Plays every root word to exhaustion with a live progress indicator and writes:
       - CSV:  per-root results (accepted count, max score, rejections, words)
       - JSON: manifest with config, start-list hash, git commit, score summary.

Usage:
    python -m apps.cli.run --vocab /usr/share/dict/words --dictionary wordfreq --sample 20
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from packages.datasets import load_root_words, pretty_summary, read_lines, validate_start_words
from packages.dictionaries import create_dictionary, get_dictionary_ids
from packages.game import WordListError
from packages.game.settings import (
    DEFAULT_DICTIONARY, DEFAULT_LANGUAGE, DEFAULT_MIN_ZIPF, ROOT_WORD_LENGTH, START_WORDS_PATH,
)
from packages.harness import run_case
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate score statistics over a batch (JSON-serializable).
    """
    if not results:
        return {"roots": 0}
    scores = np.array([r["score"] for r in results], dtype=float)
    counts = np.array([r["accepted"] for r in results], dtype=float)
    best = results[int(np.argmax(scores))]
    worst = results[int(np.argmin(scores))]
    return {
        "roots": len(results),
        "score_mean": round(float(scores.mean()), 3),
        "score_median": float(np.median(scores)),
        "score_p90": float(np.percentile(scores, 90)),
        "words_mean": round(float(counts.mean()), 3),
        "best_root": best["root"],
        "best_score": int(best["score"]),
        "worst_root": worst["root"],
        "worst_score": int(worst["score"]),
    }


def main():
    """
    Parse CLI args, validate the start list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble — analyse root words")
    ap.add_argument("--start-words", default=str(START_WORDS_PATH),
                    help="path to the start-word list")
    ap.add_argument("--vocab", required=True,
                    help="word list of candidate guesses to try against every root")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help=f"dictionary id (one of: {', '.join(get_dictionary_ids())}); "
                         f"'wordlist' uses --vocab itself")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="wordfreq language code")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF, help="wordfreq Zipf threshold")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of roots (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["bar", "plain", "off"],
        default="bar",
        help="Show run progress (tqdm bar, plain text, or nothing).",
    )
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # 1) Validate the start list and print a one-liner summary
    rep = validate_start_words(args.start_words, min_length=ROOT_WORD_LENGTH)
    print(pretty_summary(rep))

    # 2) Load lists into memory
    try:
        roots = load_root_words(args.start_words)
    except WordListError as e:
        sys.stderr.write(f"error: {e}\n")
        sys.exit(2)
    vocabulary = [w.strip().lower() for w in read_lines(args.vocab) if w.strip()]

    if args.dictionary == "wordlist":
        dictionary = create_dictionary("wordlist", words=vocabulary)
    elif args.dictionary == "wordfreq":
        dictionary = create_dictionary("wordfreq", language=args.language, min_zipf=args.min_zipf)
    else:
        dictionary = create_dictionary(args.dictionary)

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(roots):
        pool = list(roots)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(roots)

    total = len(cases)
    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Analysing", unit="root") if args.progress == "bar" else cases

    # 4) Run batch with live progress
    for idx, root in enumerate(iterator, 1):
        r = run_case(root, vocabulary=vocabulary, dictionary=dictionary, seed=args.seed + idx)
        results.append(r)

        if args.progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if args.progress == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(results)
    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "start_words": rep,
        "dictionary": dictionary.id,
        "summary": summary,
    }, str(manifest_path))

    if results:
        print(f"Roots: {summary['roots']} | mean score {summary['score_mean']} "
              f"| best {summary['best_root']} ({summary['best_score']}) "
              f"| worst {summary['worst_root']} ({summary['worst_score']})")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

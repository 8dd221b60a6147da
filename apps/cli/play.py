# apps/cli/play.py
"""
Console host for the word-scramble game.

Shows the root word, reads guesses from stdin, prints accepted words with
their points and the running score, and surfaces rejections as
"<title>: <message>" lines.

Commands:
  :new   start a new game (fresh root word, score reset)
  :hint  how many derivable vocabulary words are still unused (needs --vocab)
  :quit  leave (EOF / Ctrl-D works too)

Usage:
    python -m apps.cli.play --dictionary wordfreq
    python -m apps.cli.play --dictionary wordlist --words my_words.txt
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

from packages.datasets import load_root_words, read_lines
from packages.dictionaries import create_dictionary, get_dictionary_ids
from packages.engine import derivable_words
from packages.game import Accepted, WordListError, WordValidator
from packages.game.settings import (
    DEFAULT_DICTIONARY, DEFAULT_LANGUAGE, DEFAULT_MIN_ZIPF, FALLBACK_ROOT_WORD, START_WORDS_PATH,
)

SCORE_HINT = "1 point for each word, 1 point per letter"


def build_dictionary(args: argparse.Namespace):
    """Instantiate the dictionary backend selected on the command line."""
    if args.dictionary == "wordlist":
        if not args.words:
            raise SystemExit("--words is required with --dictionary wordlist")
        return create_dictionary("wordlist", path=args.words)
    if args.dictionary == "wordfreq":
        return create_dictionary("wordfreq", language=args.language, min_zipf=args.min_zipf)
    return create_dictionary(args.dictionary)


def render(validator: WordValidator, out: TextIO) -> None:
    out.write(f"\n== {validator.root_word} ==  Score: {validator.score}\n")
    for w in validator.accepted_words:
        out.write(f"  ({len(w)}) {w}\n")
    out.write(f"{SCORE_HINT}\n")


def play(
        validator: WordValidator,
        start_words: Optional[List[str]],
        *,
        vocabulary: Optional[List[str]] = None,
        fallback: Optional[str] = None,
        inp: Optional[TextIO] = None,
        out: Optional[TextIO] = None,
) -> int:
    """
    Run the read-submit-print loop until :quit or EOF. Returns the final score.
    """
    if inp is None:
        inp = sys.stdin
    if out is None:
        out = sys.stdout
    validator.start_session(start_words, fallback=fallback)
    render(validator, out)

    while True:
        out.write("Enter at least 3 letters> ")
        out.flush()
        line = inp.readline()
        if not line:
            out.write("\n")
            break

        cmd = line.strip()
        if not cmd:
            continue
        if cmd == ":quit":
            break
        if cmd == ":new":
            validator.start_session(start_words, fallback=fallback)
            render(validator, out)
            continue
        if cmd == ":hint":
            if vocabulary is None:
                out.write("No vocabulary loaded (use --vocab).\n")
            else:
                left = set(derivable_words(validator.root_word, vocabulary)) - set(validator.accepted_words)
                out.write(f"{len(left)} word(s) left to find.\n")
            continue

        result = validator.submit(cmd)
        if isinstance(result, Accepted):
            out.write(f"+{result.score_delta}  {result.word}\n")
            render(validator, out)
        else:
            out.write(f"{result.title}: {result.reason.message(validator.root_word)}\n")

    out.write(f"Final score: {validator.score}\n")
    return validator.score


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordscramble — play in the terminal")
    ap.add_argument("--start-words", default=str(START_WORDS_PATH),
                    help="path to the start-word list (one word per line)")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help=f"dictionary id (one of: {', '.join(get_dictionary_ids())})")
    ap.add_argument("--words", help="word file for --dictionary wordlist")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="wordfreq language code")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="wordfreq Zipf threshold for a word to count as real")
    ap.add_argument("--vocab", help="optional word list used by :hint")
    ap.add_argument("--fallback", action="store_true",
                    help=f"use '{FALLBACK_ROOT_WORD}' instead of failing when the start list is unusable")
    ap.add_argument("--seed", type=int, help="RNG seed for root selection")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        start_words = load_root_words(args.start_words)
    except WordListError as e:
        if not args.fallback:
            sys.stderr.write(f"error: {e}\n")
            return 2
        logging.getLogger(__name__).warning("%s", e)
        start_words = None

    dictionary = build_dictionary(args)
    vocabulary = [w.strip().lower() for w in read_lines(args.vocab)] if args.vocab else None
    validator = WordValidator(dictionary, rng=random.Random(args.seed))

    play(validator, start_words, vocabulary=vocabulary,
         fallback=FALLBACK_ROOT_WORD if args.fallback else None)
    return 0


if __name__ == "__main__":
    sys.exit(main())

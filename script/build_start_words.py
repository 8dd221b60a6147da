"""
Download a word list and write a clean start-word list for root selection.

What it does:
- Downloads a plain-text word list (one word per line).
- Keeps lowercase a–z words of exactly --length letters.
- Optionally drops rare words using wordfreq Zipf scores (--min-zipf).
- De-duplicates while preserving source order, and writes to file.

Usage:
    python -m script.build_start_words --out packages/datasets/data/start.txt
    python -m script.build_start_words --length 8 --min-zipf 3.5 --limit 500 --sort
"""

import argparse
from pathlib import Path

import requests
from wordfreq import zipf_frequency

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return [ln.strip() for ln in r.text.splitlines() if ln.strip()]


def select_roots(words, length: int, min_zipf: float = 0.0, language: str = "en") -> list[str]:
    """Keep clean `length`-letter words at or above the Zipf threshold."""
    out = []
    for w in words:
        w = w.strip()
        if len(w) != length or not (w.isalpha() and w == w.lower()):
            continue
        if min_zipf and zipf_frequency(w, language) < min_zipf:
            continue
        out.append(w)
    return unique_preserve_order(out)


def main():
    ap = argparse.ArgumentParser(description="Build a start-word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/start.txt")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--min-zipf", type=float, default=3.0,
                    help="drop words rarer than this wordfreq Zipf score (0 disables)")
    ap.add_argument("--language", default="en")
    ap.add_argument("--limit", type=int, help="keep at most this many words")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    roots = select_roots(fetch_words(args.url), args.length, args.min_zipf, args.language)
    if args.limit:
        roots = roots[: args.limit]
    if args.sort:
        roots = sorted(roots)

    Path(args.out).write_text("\n".join(roots) + "\n", encoding="utf-8")
    print(f"Wrote {len(roots)} start words -> {args.out}")

if __name__ == "__main__":
    main()

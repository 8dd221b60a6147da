from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from packages.game.errors import WordListError


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_root_words(p: Path | str) -> List[str]:
    """
    Load a start-word list: one word per line, lowercased, blanks dropped.

    A missing, unreadable or empty list is a configuration error, not
    something a game can recover from, so it raises WordListError.
    """
    try:
        lines = read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"could not load start words from {p}: {e}") from e

    words = [ln.strip().lower() for ln in lines if ln.strip()]
    if not words:
        raise WordListError(f"start word list is empty: {p}")
    return words

"""
Game configuration constants.

Single place for the knobs the apps and the validator share. CLI flags
override the defaults below; nothing here is read from the environment.
"""

from pathlib import Path
from typing import Final

# Root word used only when a host opts into degrading instead of failing.
FALLBACK_ROOT_WORD: Final[str] = "silkworm"

# Bundled start-word list (one eight-letter word per line).
DATA_DIR: Final[Path] = Path(__file__).resolve().parent.parent / "datasets" / "data"
START_WORDS_PATH: Final[Path] = DATA_DIR / "start.txt"
ROOT_WORD_LENGTH: Final[int] = 8

# Dictionary oracle defaults.
DEFAULT_DICTIONARY: Final[str] = "wordfreq"
DEFAULT_LANGUAGE: Final[str] = "en"
DEFAULT_MIN_ZIPF: Final[float] = 2.5

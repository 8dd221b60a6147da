"""
Start-word list validator.

What this module does:
- Validate a start.txt list (the pool root words are drawn from).
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("packages/datasets/data/start.txt", min_length=8)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class ValidationReport:
    """Diagnostics and metadata for one start-word file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest allowed root word
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_length` letters
      - a single trailing blank line is tolerated; other blank lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    lines = path.read_text(encoding="utf-8").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    for raw in lines:
        w = raw.strip()
        if w and w == w.lower() and w.isalpha() and len(w) >= min_length:
            valid.append(w)
        else:
            invalid += 1

    return valid, invalid


def validate_start_words(path: str, min_length: int = 4) -> Dict:
    """
    Validate a start-word list.

    Parameters
    ----------
    path : str
        Path to the start-word file (one word per line).
    min_length : int
        Shortest acceptable root word.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` is strict: file exists, non-empty, no invalid lines.
        Duplicates are reported as an issue but do not fail the list;
        they only skew the uniform draw.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"start words file not found: {path}")
        rep = ValidationReport(path, False, min_length, 0, 0, 0, "", False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    if not words:
        issues.append("start words file contains 0 valid words")
    if invalid:
        issues.append(f"start words has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("start words contains duplicate lines")

    rep = ValidationReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=packages/datasets/data/start.txt | words=48 (uniq=48, sha=abc123...) | min_len=8 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"start={report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| min_len={report['min_length']} | {status}"
    )

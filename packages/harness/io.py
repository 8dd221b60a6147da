"""
I/O utilities for analysis runs.

Responsibilities:
- write_csv:     flatten per-root results into a tidy CSV (one row per root).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from packages.engine import Rejection


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of per-root results to CSV.

    Schema (columns):
      root, accepted, score, time_ms, <one column per rejection reason>, words

    `words` is a single space-separated cell, newest first.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    reasons = [r.name for r in Rejection]
    fields = ["root", "accepted", "score", "time_ms"] + [r.lower() for r in reasons] + ["words"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "root": r["root"],
                "accepted": r["accepted"],
                "score": r["score"],
                "time_ms": round(float(r["time_ms"]), 3),
                "words": " ".join(r.get("words", [])),
            }
            rej = r.get("rejections", {})
            for name in reasons:
                row[name.lower()] = rej.get(name, 0)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (dictionary, paths, seed, sample, outdir)
      - start_words: output of datasets.validate_start_words(...)
      - summary: aggregate score statistics
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-session results into a tidy CSV (one row per session).
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

from packages.engine import Reason

REJECTION_TAGS = [r.value for r in Reason if r is not Reason.EMPTY]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of session results to CSV.

    Schema (columns):
      player, root, word_count, letter_count, average_length, time_ms,
      <one column per rejection reason>, words

    `words` holds the accepted words in play order, space separated.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["player", "root", "word_count", "letter_count", "average_length", "time_ms"]
    fields += REJECTION_TAGS
    fields += ["words"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "player": r.get("player_id", "?"),
                "root": r["root"],
                "word_count": r["word_count"],
                "letter_count": r["letter_count"],
                "average_length": round(float(r["average_length"]), 3),
                "time_ms": round(float(r["time_ms"]), 3),
            }
            rejections = r.get("rejections", {})
            for tag in REJECTION_TAGS:
                row[tag] = rejections.get(tag, 0)
            row["words"] = " ".join(word for word, tag in r.get("history", [])
                                    if tag == "accepted")
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (player, paths, seed, sample, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - summary: output of harness.summarize(...)
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

"""
Dataset validator for wordscramble.

What this module does:
- Validate a pair of word lists: start.txt (root-word pool) and words_<lang>.txt (dictionary).
- Enforce formatting rules (lowercase, a–z only, minimum length, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that start words ⊆ dictionary (a root word should be a real word).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("packages/datasets/data/start.txt",
                             "packages/datasets/data/words_en.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (start, dictionary) pair."""
    min_length: int
    start: FileReport
    dictionary: FileReport
    start_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

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
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            wl = w.lower()
            if wl == w and wl.isalpha() and len(wl) >= min_length:
                valid.append(wl)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(start_path: str, dictionary_path: str, *, min_length: int = 3) -> Dict:
    """
    Validate the start/dictionary word lists.

    Parameters
    ----------
    start_path : str
        Path to the root-word pool (one word per line).
    dictionary_path : str
        Path to the dictionary word list (should be a superset of start).
    min_length : int
        Shortest valid start word. Dictionary entries of any length are valid.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - start ⊆ dictionary check
          - `passed` boolean (strict: requires non-empty, no invalids, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    start_p = Path(start_path)
    dict_p = Path(dictionary_path)

    start_exists = start_p.exists()
    dict_exists = dict_p.exists()

    # Early return if either file is missing
    if not start_exists or not dict_exists:
        if not start_exists:
            issues.append(f"start file not found: {start_path}")
        if not dict_exists:
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            min_length=min_length,
            start=FileReport(start_path, start_exists, 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, dict_exists, 0, "", 0, 0),
            start_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    start, start_invalid = _load_and_check(start_p, min_length)
    words, dict_invalid = _load_and_check(dict_p, 1)

    start_report = _file_report(start_p, start, start_invalid)
    dict_report = _file_report(dict_p, words, dict_invalid)

    start_set = set(start)
    subset_ok = start_set.issubset(words)
    if not subset_ok:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        missing = sorted(start_set.difference(words))[:5]
        issues.append(f"start words not subset of dictionary (e.g., {missing})")

    if start_report.count == 0:
        issues.append("start file contains 0 valid words")
    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")

    if start_invalid:
        issues.append(f"start has {start_invalid} invalid line(s)")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")

    # Duplicates are tolerated (they only skew the root-word draw) but reported
    if start_report.count != start_report.unique_count:
        issues.append("start contains duplicate lines")
    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate lines")

    passed = (
            subset_ok
            and start_invalid == 0
            and dict_invalid == 0
            and start_report.count > 0
            and dict_report.count > 0
    )

    rep = ValidationReport(
        min_length=min_length,
        start=start_report,
        dictionary=dict_report,
        start_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=1000 (uniq=1000, sha=abc123...) | dictionary=370105 (uniq=370105, sha=def456...) | start⊆dictionary=True | OK
    """
    a = report["start"]
    b = report["dictionary"]
    subset = report["start_subset_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"start={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| start⊆dictionary={subset} | {status}"
    )

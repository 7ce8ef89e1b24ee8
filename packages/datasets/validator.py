"""
Root-word list validator.

What this module does:
- Validate a root-word list file (e.g. data/start.txt).
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_root_wordlist, pretty_summary
    rep = validate_root_wordlist("packages/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one root-word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest acceptable root word
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
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
      - empty/whitespace-only lines are INVALID, except a single trailing one

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    # splitlines() drops the final newline, so a well-formed file has no blank tail
    for raw in path.read_text(encoding="utf-8").splitlines():
        w = raw.strip()
        if not w:
            invalid += 1
            continue
        if w == w.lower() and w.isalpha() and w.isascii() and len(w) >= min_length:
            valid.append(w)
        else:
            invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_root_wordlist(path: str, min_length: int = 3) -> Dict:
    """
    Validate a root-word list.

    Parameters
    ----------
    path : str
        Path to the list (one root word per line).
    min_length : int
        Shortest acceptable root word. Anything shorter cannot yield a
        3-letter answer that differs from the root.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - `passed` boolean (strict: requires non-empty, no invalids, no duplicates)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []
    p = Path(path)

    # Early return if the file is missing
    if not p.exists():
        issues.append(f"root word file not found: {path}")
        rep = WordlistReport(path, False, min_length, 0, 0, 0, "", False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    if not words:
        issues.append("root word file contains 0 valid words")
    if invalid:
        issues.append(f"root word file has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("root word file contains duplicate lines")

    passed = bool(words) and invalid == 0 and len(words) == len(unique)

    rep = WordlistReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        root words=412 (uniq=412, invalid=0, sha=abc123...) | min_length=3 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"root words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) "
        f"| min_length={report['min_length']} | {status}"
    )

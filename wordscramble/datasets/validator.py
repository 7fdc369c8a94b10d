"""
Start-word list validator for wordscramble.

What this module does:
- Validate a start-word list (the root words a round can begin with).
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters,
  one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Optionally check every root against a vocabulary: the root should itself be
  a known word, and it should leave at least one other word to find.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("wordscramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, List, Tuple
import hashlib

from wordscramble.config import SETTINGS
from wordscramble.engine import spellable_words


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
    """Top-level validation result for a start-word list."""
    min_length: int
    start_words: FileReport
    vocabulary_size: int     # 0 when no vocabulary was given
    unknown_words: List[str]  # roots missing from the vocabulary
    barren_words: List[str]   # roots with nothing else to spell
    passed: bool
    issues: List[str]         # human-friendly list of problems (if any)


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


def _as_dict(rep: ValidationReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_start_words(
        path: str,
        vocabulary: Iterable[str] | None = None,
        min_length: int | None = None,
) -> Dict:
    """
    Validate a start-word list.

    Parameters
    ----------
    path : str
        Path to the start-word file (one word per line).
    vocabulary : Iterable[str], optional
        Known words (e.g., a dictionary word list). When given, each root
        must be in it and must spell at least one other word from it.
    min_length : int, optional
        Shortest acceptable root (defaults to SETTINGS.min_root_length).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, invalid/duplicate diagnostics, vocabulary checks,
        a strict `passed` flag and an `issues` list.
    """
    if min_length is None:
        min_length = SETTINGS.min_root_length
    issues: List[str] = []

    p = Path(path)
    if not p.exists():
        issues.append(f"start-word file not found: {path}")
        rep = ValidationReport(
            min_length=min_length,
            start_words=FileReport(path, False, 0, "", 0, 0),
            vocabulary_size=0,
            unknown_words=[],
            barren_words=[],
            passed=False,
            issues=issues,
        )
        return _as_dict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = list(dict.fromkeys(words))

    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("start-word file contains 0 valid words")
    if invalid:
        issues.append(f"start-word file has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append("start-word file contains duplicate lines")

    # Vocabulary checks (skipped when no vocabulary is given)
    vocab: List[str] = []
    unknown: List[str] = []
    barren: List[str] = []
    if vocabulary is not None:
        vocab = list(dict.fromkeys(w.strip().lower() for w in vocabulary if w.strip()))
        vocab_set = set(vocab)
        unknown = [w for w in unique if w not in vocab_set]
        barren = [w for w in unique if not spellable_words(vocab, w)]
        if unknown:
            # Surface a few examples to debug quickly (limit to 5 for brevity)
            issues.append(f"{len(unknown)} root(s) not in vocabulary (e.g., {unknown[:5]})")
        if barren:
            issues.append(f"{len(barren)} root(s) spell no other word (e.g., {barren[:5]})")

    passed = (
            report.count > 0
            and invalid == 0
            and report.count == report.unique_count
            and not unknown
            and not barren
    )

    rep = ValidationReport(
        min_length=min_length,
        start_words=report,
        vocabulary_size=len(vocab),
        unknown_words=unknown,
        barren_words=barren,
        passed=passed,
        issues=issues,
    )
    return _as_dict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=48 (uniq=48, sha=abc123...) | min_len=8 | vocab=0 | unknown=0 | barren=0 | OK
    """
    s = report["start_words"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (s.get("sha256") or "")[:12]
    return (
        f"start={s['count']} (uniq={s['unique_count']}, sha={sha}) "
        f"| min_len={report['min_length']} | vocab={report['vocabulary_size']} "
        f"| unknown={len(report['unknown_words'])} | barren={len(report['barren_words'])} "
        f"| {status}"
    )

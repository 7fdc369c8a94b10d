"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:     one row per submission (tidy transcript).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Raw submissions are written as typed. In the raw and word columns a leading '=', '+', '-' or '@' is
  prefixed with an apostrophe so spreadsheet apps don't treat it as a formula.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["index", "root", "raw", "word", "verdict", "reason", "used_count"]


def _excel_safe(text: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "=sum" -> "'=sum"
    """
    return "'" + text if text[:1] in ("=", "+", "-", "@") else text


def write_csv(rows: List[Dict], path: str) -> str:
    """
    Serialize a replay transcript to CSV.

    Schema (columns):
      index, root, raw, word, verdict, reason, used_count

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            row = {k: r.get(k, "") for k in FIELDS}
            row["raw"] = _excel_safe(str(row["raw"]))
            row["word"] = _excel_safe(str(row["word"]))
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and start-word validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (root, paths, seed, outdir)
      - start_words: output of datasets.validate_start_words(...)
      - summary: verdict/reason counts
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

"""
Scripted replay of submissions through a session.

- replay: feed each submission to `Session.submit` in order and record one
  row per submission (what was typed, what it normalized to, the verdict).

This is UI-agnostic so it can be reused by the replay CLI, a notebook, or
tests without changes. The caller owns the session (and its root word).
"""

from __future__ import annotations
from typing import Dict, Iterable, List

from wordscramble.engine import Session


def replay(session: Session, submissions: Iterable[str]) -> List[Dict]:
    """
    Submit every string in `submissions` and collect the outcomes.

    Args:
        session:     an active session (start/restart already called)
        submissions: raw strings, exactly as a player would type them

    Returns:
        list of dicts with keys:
            index (int, 1-based), root (str), raw (str), word (str),
            verdict (str), reason (str, empty unless rejected),
            used_count (int, accepted words after this submission)
    """
    rows: List[Dict] = []
    for idx, raw in enumerate(submissions, start=1):
        outcome = session.submit(raw)
        rows.append({
            "index": idx,
            "root": session.root_word,
            "raw": raw,
            "word": outcome.word,
            "verdict": outcome.verdict.value,
            "reason": outcome.reason.value if outcome.reason else "",
            "used_count": len(session.used_words),
        })
    return rows


def summarize(rows: List[Dict]) -> Dict[str, int]:
    """Count rows per verdict and per rejection reason."""
    out: Dict[str, int] = {"total": len(rows)}
    for r in rows:
        out[r["verdict"]] = out.get(r["verdict"], 0) + 1
        if r["reason"]:
            out[r["reason"]] = out.get(r["reason"], 0) + 1
    return out

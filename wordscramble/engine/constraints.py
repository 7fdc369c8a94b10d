"""
Candidate filtering against a root word.

Given:
  - a pool of words (e.g., a dictionary word list)
  - a root word

Return:
  - the words that could be accepted in a session for that root (ignoring
    the dictionary and "already used" checks, which depend on session state).

Used by the CLI hint counter and by the start-word validator to make sure a
root word actually leaves something to find.
"""

from typing import Iterable, List, Set

from .letters import can_spell, normalize


def spellable_words(words: Iterable[str], root: str, *, exclude_root: bool = True) -> List[str]:
    """
    Keep only words that can be spelled from `root`'s letters.

    Args:
      words        : iterable of candidate words (any case/whitespace)
      root         : the root word
      exclude_root : drop the root itself (sessions never accept it)

    Returns:
      List[str] of normalized words, order preserved, duplicates removed.
    """
    root = normalize(root)
    seen: Set[str] = set()
    out: List[str] = []

    for w in words:
        w = normalize(w)

        # Basic hygiene: skip blanks and anything that isn't a clean alpha token
        if not w or not w.isalpha() or w in seen:
            continue
        if exclude_root and w == root:
            continue

        if can_spell(w, root):
            seen.add(w)
            out.append(w)

    return out

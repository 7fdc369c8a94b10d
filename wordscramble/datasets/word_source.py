"""
Root-word sources.

A word source answers one question: "which root word should the next round
use?" It returns None when it has nothing to offer; the session decides what
to do about that (it falls back to a default root).

  - StaticWordSource: random pick from an in-memory list
  - FileWordSource:   random pick from a newline-separated file (the bundled
                      start.txt by default)
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional

from wordscramble.config import SETTINGS

from .io import load_words

log = logging.getLogger(__name__)


class StaticWordSource:
    def __init__(self, words: Iterable[str], seed: int | None = None):
        self.words: List[str] = [w.strip().lower() for w in words if w.strip()]
        self.rng = random.Random(seed)

    def pick_root(self) -> Optional[str]:
        if not self.words:
            return None
        return self.rng.choice(self.words)

    def __repr__(self) -> str:
        return f"StaticWordSource({len(self.words)} words)"


class FileWordSource:
    """
    Pick a random line from a word-list file.

    The file is read on every pick so edits show up on the next round.
    A missing file or one with no usable words yields None (logged), never
    an exception.
    """

    def __init__(self, path: Path | str | None = None, seed: int | None = None):
        self.path = Path(path or SETTINGS.start_words)
        self.rng = random.Random(seed)

    def pick_root(self) -> Optional[str]:
        try:
            words = load_words(self.path)
        except FileNotFoundError:
            log.warning("start-word list not found: %s", self.path)
            return None
        except (OSError, UnicodeDecodeError) as e:
            log.warning("start-word list unreadable: %s (%s)", self.path, e)
            return None

        if not words:
            log.warning("start-word list has no usable words: %s", self.path)
            return None
        return self.rng.choice(words)

    def __repr__(self) -> str:
        return f"FileWordSource({str(self.path)!r})"

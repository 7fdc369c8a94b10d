"""
Defaults and environment overrides for wordscramble.

- Every setting has a built-in default; a WORDSCRAMBLE_* environment variable
  overrides it.
- CLI flags in apps/cli take precedence over SETTINGS (they use SETTINGS as
  their argparse defaults).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

# Bundled list of root words, one per line.
DEFAULT_START_WORDS = Path(__file__).parent / "datasets" / "data" / "start.txt"

# Root word used when nothing else is available.
DEFAULT_FALLBACK_ROOT = "silkworm"


def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None) -> Any:
    env = os.environ.get(name)
    if env is not None and env.strip():
        return cast(env) if cast else env
    return default


@dataclass(frozen=True)
class Settings:
    # Used when the word source can't supply a root word
    fallback_root: str
    # Language tag passed to every dictionary query
    language: str
    # Start-word list used by FileWordSource when no path is given
    start_words: str
    # Shortest word a start-word list may contain (validator)
    min_root_length: int
    # Python logging level name for the CLIs
    log_level: str


def load_settings() -> Settings:
    """Read the environment now and build a Settings instance."""
    return Settings(
        fallback_root=_get("WORDSCRAMBLE_FALLBACK_ROOT", DEFAULT_FALLBACK_ROOT, cast=lambda v: v.strip().lower()),
        language=_get("WORDSCRAMBLE_LANGUAGE", "en"),
        start_words=_get("WORDSCRAMBLE_START_WORDS", str(DEFAULT_START_WORDS)),
        min_root_length=int(_get("WORDSCRAMBLE_MIN_ROOT_LENGTH", 8, cast=int)),
        log_level=_get("WORDSCRAMBLE_LOG_LEVEL", "WARNING", cast=str.upper),
    )


SETTINGS = load_settings()

"""
Game session: one root word plus the words accepted against it.

A submission is accepted iff, after normalization (strip + lowercase), it is:
  - non-empty (empty input is ignored, no error surfaced)
  - not already accepted in this session
  - not the root word itself
  - spellable from the root's letters (each letter used at most once)
  - a real word according to the plugged-in dictionary

The checks run in exactly that order and stop at the first failure, so each
rejection carries one reason. None of them raise: failures are Outcome values
the presentation layer renders (title + message, as in an alert dialog).

The session is UI-agnostic. A front-end either reads `used_words` after each
`submit` or registers a listener with `subscribe`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from wordscramble.config import DEFAULT_FALLBACK_ROOT, SETTINGS

from .letters import can_spell, normalize

log = logging.getLogger(__name__)


# -----------------------------
# Collaborators
# -----------------------------

class Dictionary(Protocol):
    """Anything that can tell whether a single token is a real word."""

    def is_valid_word(self, word: str, language: str = "en") -> bool:
        ...


class WordSource(Protocol):
    """Supplies a root word, or None when it has nothing to offer."""

    def pick_root(self) -> Optional[str]:
        ...


# -----------------------------
# Outcomes
# -----------------------------

class Verdict(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IGNORED = "ignored"


class Reason(str, Enum):
    ALREADY_USED = "already_used"
    IS_ROOT_WORD = "is_root_word"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"


# (title, message) per rejection reason; messages may mention {root}.
REASON_TEXT: Dict[Reason, Tuple[str, str]] = {
    Reason.ALREADY_USED: ("Word used already", "Be more original"),
    Reason.IS_ROOT_WORD: ("Word is the root", "That's the word you started with!"),
    Reason.NOT_POSSIBLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    Reason.NOT_REAL: ("Word not recognized", "You can't just make them up, you know!"),
}


@dataclass(frozen=True)
class Outcome:
    """Result of one submission."""
    verdict: Verdict
    word: str = ""                   # normalized candidate
    reason: Optional[Reason] = None  # set only when rejected
    title: str = ""
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.verdict is Verdict.ACCEPTED

    @property
    def rejected(self) -> bool:
        return self.verdict is Verdict.REJECTED

    @property
    def ignored(self) -> bool:
        return self.verdict is Verdict.IGNORED


Listener = Callable[["Session", Optional[Outcome]], None]


def _usable_fallback(word: str) -> str:
    """The fallback root must itself be playable; otherwise use the built-in one."""
    root = normalize(word)
    if not root or not root.isalpha():
        log.warning("fallback root %r is not a non-empty alphabetic word; using %r",
                    word, DEFAULT_FALLBACK_ROOT)
        return DEFAULT_FALLBACK_ROOT
    return root


class SessionNotStarted(RuntimeError):
    """Raised when a session is used before it has a root word."""


# -----------------------------
# Session
# -----------------------------

class Session:
    """
    Holds the root word and the accepted words, newest first.

    States:
      - uninitialized: no root word yet; `submit` raises SessionNotStarted
      - active:        root word set; `start`/`restart` begin a new round
                       (accepted words cleared)
    """

    def __init__(self, dictionary: Dictionary, *, language: str | None = None,
                 fallback_root: str | None = None):
        self.dictionary = dictionary
        self.language = language or SETTINGS.language
        self.fallback_root = _usable_fallback(fallback_root or SETTINGS.fallback_root)
        self._root: str | None = None
        self._used: List[str] = []
        self._listeners: List[Listener] = []

    # ---- state ----

    @property
    def root_word(self) -> str | None:
        return self._root

    @property
    def used_words(self) -> Tuple[str, ...]:
        """Accepted words, most recent first (read-only snapshot)."""
        return tuple(self._used)

    @property
    def is_active(self) -> bool:
        return self._root is not None

    # ---- lifecycle ----

    def start(self, word_source: WordSource) -> str:
        """
        Begin a round with a root word picked by `word_source`.

        If the source yields nothing usable (None, blank, non-alphabetic, or
        an OSError or decode error while reading), log a warning and use the fallback root
        instead of giving up.

        Returns:
          The root word now in play.
        """
        try:
            picked = word_source.pick_root()
        except (OSError, UnicodeDecodeError) as e:
            log.warning("word source %r failed: %s", word_source, e)
            picked = None

        root = normalize(picked) if picked else ""
        if not root or not root.isalpha():
            log.warning("no usable root word from %r (got %r); falling back to %r",
                        word_source, picked, self.fallback_root)
            root = self.fallback_root

        return self.restart(root)

    def restart(self, root_word: str) -> str:
        """Begin a round with an explicit root word; accepted words are cleared."""
        root = normalize(root_word)
        if not root or not root.isalpha():
            raise ValueError(f"root word must be a non-empty alphabetic string; got {root_word!r}")

        self._root = root
        self._used = []
        log.info("new round: root=%s", root)
        self._notify(None)
        return root

    # ---- the rule ----

    def submit(self, candidate: str) -> Outcome:
        """
        Run one candidate through the acceptance rule.

        Only an accepted word changes state: it's inserted at the front of
        `used_words` in normalized form.
        """
        root = self._require_root()
        word = normalize(candidate)

        if not word:
            return Outcome(Verdict.IGNORED)

        if not self.is_original(word):
            outcome = self._reject(word, Reason.ALREADY_USED)
        elif self.is_root(word):
            outcome = self._reject(word, Reason.IS_ROOT_WORD)
        elif not self.is_possible(word):
            outcome = self._reject(word, Reason.NOT_POSSIBLE)
        elif not self.is_real(word):
            outcome = self._reject(word, Reason.NOT_REAL)
        else:
            self._used.insert(0, word)
            outcome = Outcome(Verdict.ACCEPTED, word)

        log.debug("root=%s word=%s verdict=%s reason=%s", root, word,
                  outcome.verdict.value, outcome.reason.value if outcome.reason else "-")
        self._notify(outcome)
        return outcome

    def is_original(self, word: str) -> bool:
        return normalize(word) not in self._used

    def is_root(self, word: str) -> bool:
        return normalize(word) == self._require_root()

    def is_possible(self, word: str) -> bool:
        return can_spell(word, self._require_root())

    def is_real(self, word: str) -> bool:
        return bool(self.dictionary.is_valid_word(normalize(word), self.language))

    # ---- observers ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call `listener(session, outcome)` after every non-ignored submission,
        and `listener(session, None)` when a new round starts.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- helpers ----

    def _require_root(self) -> str:
        if self._root is None:
            raise SessionNotStarted("session has no root word; call start() or restart() first")
        return self._root

    def _reject(self, word: str, reason: Reason) -> Outcome:
        title, message = REASON_TEXT[reason]
        return Outcome(Verdict.REJECTED, word, reason, title, message.format(root=self._root))

    def _notify(self, outcome: Optional[Outcome]) -> None:
        for listener in list(self._listeners):
            listener(self, outcome)

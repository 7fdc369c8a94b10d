from .letters import normalize, can_spell
from .constraints import spellable_words
from .session import Session, SessionNotStarted, Outcome, Verdict, Reason, REASON_TEXT

__all__ = ["normalize", "can_spell", "spellable_words", "Session", "SessionNotStarted",
           "Outcome", "Verdict", "Reason", "REASON_TEXT"]

import logging

import pytest

from wordscramble.datasets import FileWordSource, StaticWordSource
from wordscramble.engine import Session, SessionNotStarted, Verdict, Reason


def test_accepts_spellable_real_word(session):
    out = session.submit("silk")
    assert out.accepted
    assert out.word == "silk"
    assert out.reason is None
    assert session.used_words == ("silk",)


def test_newest_first_and_normalized(session):
    session.submit("silk")
    session.submit("  WORM ")
    assert session.used_words == ("worm", "silk")


def test_already_used_case_insensitive(session):
    session.submit("silk")
    out = session.submit(" SILK ")
    assert out.verdict is Verdict.REJECTED
    assert out.reason is Reason.ALREADY_USED
    assert out.title == "Word used already"
    assert session.used_words == ("silk",)


@pytest.mark.parametrize("word", ["silkworms", "xyz", "pepper"])
def test_not_possible(session, word):
    out = session.submit(word)
    assert out.reason is Reason.NOT_POSSIBLE
    assert "silkworm" in out.message
    assert session.used_words == ()


def test_not_real(session):
    out = session.submit("mlik")
    assert out.reason is Reason.NOT_REAL
    assert out.title == "Word not recognized"
    assert session.used_words == ()


def test_root_word_rejected(session):
    out = session.submit("SilkWorm")
    assert out.reason is Reason.IS_ROOT_WORD
    assert session.used_words == ()


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_blank_is_ignored(session, raw):
    out = session.submit(raw)
    assert out.verdict is Verdict.IGNORED
    assert not out.rejected and not out.accepted
    assert out.title == ""
    assert session.used_words == ()


def test_originality_checked_before_subset(dictionary):
    # Once accepted, a word fails on "already used" even though it's possible.
    s = Session(dictionary)
    s.restart("silkworm")
    s.submit("owl")
    assert s.submit("owl").reason is Reason.ALREADY_USED


def test_rejection_is_idempotent(session):
    first = session.submit("xyz")
    second = session.submit("xyz")
    assert first == second
    assert session.used_words == ()


def test_language_passed_to_dictionary():
    seen = []

    class Recorder:
        def is_valid_word(self, word, language="en"):
            seen.append((word, language))
            return True

    s = Session(Recorder(), language="fr")
    s.restart("silkworm")
    assert s.submit("Silk").accepted
    assert seen == [("silk", "fr")]


def test_submit_before_start_raises(dictionary):
    s = Session(dictionary)
    assert not s.is_active
    with pytest.raises(SessionNotStarted):
        s.submit("silk")


@pytest.mark.parametrize("root", ["", "   ", "silk worm", "abc1"])
def test_restart_rejects_bad_root(dictionary, root):
    with pytest.raises(ValueError):
        Session(dictionary).restart(root)


def test_restart_clears_used_words(session):
    session.submit("silk")
    assert session.restart("absolute") == "absolute"
    assert session.root_word == "absolute"
    assert session.used_words == ()


def test_start_uses_word_source(dictionary):
    s = Session(dictionary)
    assert s.start(StaticWordSource(["Absolute"])) == "absolute"
    assert s.is_active


def test_start_falls_back_when_source_is_empty(dictionary, caplog):
    caplog.set_level(logging.WARNING)
    s = Session(dictionary, fallback_root="Silkworm")
    assert s.start(StaticWordSource([])) == "silkworm"
    assert "falling back" in caplog.text


def test_start_falls_back_when_file_is_missing(dictionary, tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    s = Session(dictionary, fallback_root="silkworm")
    assert s.start(FileWordSource(tmp_path / "missing.txt")) == "silkworm"
    assert "not found" in caplog.text


def test_start_falls_back_when_file_is_not_utf8(dictionary, tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    p = tmp_path / "start.txt"
    p.write_bytes(b"silkworm\n\xff\xfeabsolute\n")
    s = Session(dictionary, fallback_root="silkworm")
    assert s.start(FileWordSource(p)) == "silkworm"
    assert "unreadable" in caplog.text


@pytest.mark.parametrize("fallback", ["silk worm", "abc1", "   "])
def test_bad_fallback_root_reverts_to_default(dictionary, tmp_path, caplog, fallback):
    caplog.set_level(logging.WARNING)
    s = Session(dictionary, fallback_root=fallback)
    assert s.fallback_root == "silkworm"
    assert s.start(FileWordSource(tmp_path / "missing.txt")) == "silkworm"
    assert "fallback root" in caplog.text


def test_start_falls_back_on_os_error(dictionary):
    class Broken:
        def pick_root(self):
            raise PermissionError("denied")

    s = Session(dictionary, fallback_root="silkworm")
    assert s.start(Broken()) == "silkworm"


def test_start_again_resets_round(session):
    session.submit("silk")
    session.start(StaticWordSource(["absolute"]))
    assert session.used_words == ()


def test_subscribe_and_unsubscribe(session):
    events = []
    unsubscribe = session.subscribe(lambda s, outcome: events.append(outcome))

    session.submit("silk")
    session.submit("   ")  # ignored: no notification
    session.submit("xyz")
    session.restart("absolute")
    unsubscribe()
    session.submit("lute")

    assert [e.verdict if e else None for e in events] == [Verdict.ACCEPTED, Verdict.REJECTED, None]
    unsubscribe()  # second call is harmless

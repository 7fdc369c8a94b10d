import io
import json
from pathlib import Path

from apps.cli import play, replay
from wordscramble.datasets import StaticWordSource


def test_run_loop_transcript(session):
    out = io.StringIO()
    lines = ["silk\n", "worm\n", "silk\n", "   \n", "xyz\n", ":hint\n", ":quit\n", "milk\n"]
    play.run_loop(session, StaticWordSource(["absolute"]), lines, out)
    text = out.getvalue()

    assert text.startswith("Root word: silkworm\n")
    assert " 4  worm\n 4  silk\n" in text
    assert "Word used already: Be more original" in text
    assert "Word not possible" in text
    assert "7 word(s) left to find." in text
    assert "milk" not in session.used_words  # after :quit


def test_run_loop_new_round(session):
    out = io.StringIO()
    play.run_loop(session, StaticWordSource(["absolute"]), ["silk", ":new"], out)
    assert session.root_word == "absolute"
    assert session.used_words == ()
    assert out.getvalue().endswith("Root word: absolute\n")


def test_play_main_reads_stdin(tmp_path: Path, monkeypatch, capsys):
    words = tmp_path / "words.txt"
    words.write_text("silk\nworm\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("Silk\nnope\n"))

    rc = play.main(["--root", "silkworm", "--dictionary", str(words)])
    text = capsys.readouterr().out
    assert rc == 0
    assert "Root word: silkworm" in text
    assert " 4  silk" in text
    assert "Word not possible" in text


def test_replay_main_writes_outputs(tmp_path: Path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("silk\nworm\nowl\n", encoding="utf-8")
    subs = tmp_path / "subs.txt"
    subs.write_text("silk\nworm\nsilk\n\nxyz\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = replay.main(["--submissions", str(subs), "--root", "silkworm", "--dictionary", str(words),
                      "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0
    assert "accepted=2 | rejected=2 | ignored=1" in capsys.readouterr().out

    manifests = list(outdir.glob("replay_*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("replay_*.csv"))) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["root"] == "silkworm"
    assert m["used_words"] == ["worm", "silk"]
    assert m["summary"]["already_used"] == 1


def test_hint_with_corpus_dictionary():
    from wordscramble.datasets import NltkDictionary
    from wordscramble.engine import Session

    class Corpus:
        def words(self):
            return ["Silk", "worm", "owl", "xyz"]

    s = Session(NltkDictionary(corpus=Corpus()))
    s.restart("silkworm")
    s.submit("owl")
    out = io.StringIO()
    play.run_loop(s, StaticWordSource(["absolute"]), [":hint"], out)
    assert "2 word(s) left to find." in out.getvalue()


def test_replay_main_checks_start_words_against_word_list(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("silkworm\nsilk\nworm\n", encoding="utf-8")
    start = tmp_path / "start.txt"
    start.write_text("silkworm\nzzzzzzzz\n", encoding="utf-8")
    subs = tmp_path / "subs.txt"
    subs.write_text("silk\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = replay.main(["--submissions", str(subs), "--root", "silkworm", "--dictionary", str(words),
                      "--start-words", str(start), "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0

    m = json.loads(next(outdir.glob("replay_*_manifest.json")).read_text(encoding="utf-8"))
    rep = m["start_words"]
    assert rep["unknown_words"] == ["zzzzzzzz"]
    assert rep["barren_words"] == ["zzzzzzzz"]
    assert rep["vocabulary_size"] == 3
    assert rep["passed"] is False

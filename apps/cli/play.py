# apps/cli/play.py
"""
Interactive terminal front-end for wordscramble.

This script:
  1) Builds a dictionary (a word-list file, or the NLTK words corpus).
  2) Starts a session with a root word (explicit --root, or a random pick
     from the start-word list; a missing list falls back to the default root).
  3) Reads one word per line and shows the result:
       - accepted: the used-word list, newest first, with each word's length
       - rejected: an error title and message
       - blank:    nothing

Commands:
  :new   start a new round with a fresh root word
  :hint  how many words are still left to find
  :quit  exit (EOF works too)
"""

from __future__ import annotations

import argparse
import logging
import sys
import collections.abc
from typing import Iterable, TextIO

from wordscramble.config import SETTINGS
from wordscramble.datasets import FileWordSource, open_dictionary
from wordscramble.engine import Session, spellable_words

log = logging.getLogger("wordscramble.play")


def render_used(session: Session) -> str:
    """One line per accepted word, newest first: ' 4  silk'."""
    return "\n".join(f"{len(w):>2}  {w}" for w in session.used_words)


def remaining_count(session: Session) -> int | None:
    """Words still findable this round, or None if the dictionary can't enumerate."""
    if not isinstance(session.dictionary, collections.abc.Iterable):
        return None
    used = set(session.used_words)
    return sum(1 for w in spellable_words(session.dictionary, session.root_word) if w not in used)


def run_loop(session: Session, word_source, lines: Iterable[str], out: TextIO) -> None:
    """
    Drive `session` from an iterable of input lines until :quit or exhaustion.

    Kept separate from main() so it can run against any text stream.
    """
    out.write(f"Root word: {session.root_word}\n")

    for line in lines:
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":new":
            root = session.start(word_source)
            out.write(f"Root word: {root}\n")
            continue
        if cmd == ":hint":
            left = remaining_count(session)
            if left is None:
                out.write("Hints need a dictionary that can list its words.\n")
            else:
                out.write(f"{left} word(s) left to find.\n")
            continue

        outcome = session.submit(line)
        if outcome.accepted:
            out.write(render_used(session) + "\n")
        elif outcome.rejected:
            out.write(f"{outcome.title}: {outcome.message}\n")
        out.flush()


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, set up the session, and run the input loop on stdin.
    """
    ap = argparse.ArgumentParser(description="wordscramble — spell words from a root word")
    ap.add_argument("--root", help="explicit root word (default: random pick from --start-words)")
    ap.add_argument("--start-words", default=SETTINGS.start_words,
                    help="start-word list, one word per line")
    ap.add_argument("--dictionary", default="nltk",
                    help="'nltk' for the NLTK words corpus, or a path to a word list")
    ap.add_argument("--language", default=SETTINGS.language, help="language tag for lookups")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word picks")
    ap.add_argument("--log-level", default=SETTINGS.log_level,
                    help="Python logging level (e.g., INFO, DEBUG)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    dictionary = open_dictionary(args.dictionary, language=args.language)
    word_source = FileWordSource(args.start_words, seed=args.seed)
    session = Session(dictionary, language=args.language)

    if args.root:
        session.restart(args.root)
    else:
        session.start(word_source)
    log.info("dictionary=%s root=%s", args.dictionary, session.root_word)

    run_loop(session, word_source, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())

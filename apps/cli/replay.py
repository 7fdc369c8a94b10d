# apps/cli/replay.py
"""
CLI entry point for replaying scripted submissions.

This script:
  1) Builds the dictionary.
  2) Validates the start-word list (prints counts + SHA, checks formatting; with a
     word-list dictionary, also flags roots it doesn't know or that spell nothing).
  3) Builds a session with the requested (or a random) root.
  4) Replays every line of the submissions file with a progress bar and writes:
       - CSV:  one row per submission (raw input, normalized word, verdict, reason)
       - JSON: manifest with config, start-word report, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from wordscramble.config import SETTINGS
from wordscramble.datasets import FileWordSource, WordListDictionary, open_dictionary, pretty_summary, \
    read_lines, validate_start_words
from wordscramble.engine import Session
from wordscramble.harness import replay, summarize
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

log = logging.getLogger("wordscramble.replay")


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, validate the start words, replay the submissions, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble — replay scripted submissions")
    ap.add_argument("--submissions", required=True, help="text file, one submission per line")
    ap.add_argument("--root", help="explicit root word (default: random pick from --start-words)")
    ap.add_argument("--start-words", default=SETTINGS.start_words,
                    help="start-word list, one word per line")
    ap.add_argument("--dictionary", default="nltk",
                    help="'nltk' for the NLTK words corpus, or a path to a word list")
    ap.add_argument("--language", default=SETTINGS.language, help="language tag for lookups")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for the root-word pick")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar",
                    help="show a progress bar while replaying")
    ap.add_argument("--log-level", default=SETTINGS.log_level,
                    help="Python logging level (e.g., INFO, DEBUG)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Dictionary; a word list doubles as the vocabulary for start-word checks
    dictionary = open_dictionary(args.dictionary, language=args.language)
    vocabulary = dictionary if isinstance(dictionary, WordListDictionary) else None

    # 2) Validate the start-word list and print a one-liner summary
    rep = validate_start_words(args.start_words, vocabulary=vocabulary)
    print(pretty_summary(rep))
    if not rep["passed"]:
        log.warning("start-word list has issues: %s", "; ".join(rep["issues"]))

    # 3) Session
    session = Session(dictionary, language=args.language)
    if args.root:
        session.restart(args.root)
    else:
        session.start(FileWordSource(args.start_words, seed=args.seed))

    # 4) Replay (blank lines are kept; the session ignores them)
    submissions = read_lines(args.submissions)
    iterator = submissions
    if args.progress == "bar":
        iterator = tqdm(submissions, ncols=80, desc="Replaying", unit="word")
    rows = replay(session, iterator)
    summary = summarize(rows)

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "start_words": rep,
        "root": session.root_word,
        "used_words": list(session.used_words),
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Root: {session.root_word} | accepted={summary.get('accepted', 0)} "
          f"| rejected={summary.get('rejected', 0)} | ignored={summary.get('ignored', 0)}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

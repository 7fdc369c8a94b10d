"""
Download a plain-text English word list and build a start-word list from it.

What it does:
- Downloads a newline-separated word list.
- Keeps lowercase alphabetic words of exactly --length letters.
- De-duplicates while preserving list order, optionally samples --count words
  (seeded), and writes them one per line.

Usage:
    python -m script.fetch_start_words --out wordscramble/datasets/data/start.txt
    # 500 random 8-letter roots:
    python -m script.fetch_start_words --count 500 --seed 7
"""

import argparse
import random

import requests

from script.dedupe_txt import unique_preserve_order
from wordscramble.datasets.io import write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL, length: int = 8) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = [ln.strip().lower() for ln in r.text.splitlines()]
    return unique_preserve_order([w for w in words if len(w) == length and w.isalpha()])


def main():
    ap = argparse.ArgumentParser(description="Build a start-word list from a downloaded word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="wordscramble/datasets/data/start.txt")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--count", type=int, help="keep only this many words (random sample)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --count sampling")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically")
    args = ap.parse_args()

    words = fetch_words(args.url, args.length)
    if args.count and args.count < len(words):
        words = random.Random(args.seed).sample(words, args.count)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} start words -> {args.out}")


if __name__ == "__main__":
    main()

"""
Clean up a word-list file (start words or a dictionary list).

Features:
- Preserves original order by default (stable dedupe).
- Case-insensitive by default (treat 'SILK' == 'silk'); words are written lowercased.
- Drops blank lines and non-alphabetic tokens.
- Optional --min-length / --max-length filters (e.g. keep only 8-letter roots).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in wordscramble/datasets/data/start.txt \
        --min-length 8 --max-length 8
"""

import argparse
from pathlib import Path

from wordscramble.datasets.io import read_lines, write_lines


def unique_preserve_order(lines: list[str], key=None) -> list[str]:
    seen, out = set(), []
    for s in lines:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out


def clean_words(lines: list[str], min_length: int = 1, max_length: int | None = None) -> list[str]:
    words = [s.strip().lower() for s in lines]
    return [
        w for w in words
        if w.isalpha() and len(w) >= min_length and (max_length is None or len(w) <= max_length)
    ]


def main():
    ap = argparse.ArgumentParser(description="Dedupe and clean a word-list file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--min-length", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--max-length", type=int, help="drop words longer than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = unique_preserve_order(clean_words(lines, args.min_length, args.max_length))
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} unique)")


if __name__ == "__main__":
    main()

"""
Build a root-word list from the wordfreq corpus.

What it does:
- Takes the N most frequent words of a language (wordfreq.top_n_list).
- Keeps lowercase alphabetic words of exactly --length letters.
- De-duplicates while preserving frequency order, optionally sorts, writes one per line.

Usage:
    python -m script.build_start_words --out packages/datasets/data/start.txt
    python -m script.build_start_words --length 7 --top 80000 --sort --out start_7.txt
"""

import argparse

from packages.datasets import write_lines
from packages.dictionary import top_words


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def select_root_words(words, length: int) -> list[str]:
    return unique_preserve_order(w.lower() for w in words if len(w) == length and w.isascii())


def main():
    ap = argparse.ArgumentParser(description="Build a root-word list from wordfreq")
    ap.add_argument("--language", default="en")
    ap.add_argument("--top", type=int, default=30000, help="how many frequent words to scan")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--out", default="packages/datasets/data/start.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "frequency order")
    args = ap.parse_args()

    words = select_root_words(top_words(args.language, args.top), args.length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} root words -> {args.out}")


if __name__ == "__main__":
    main()

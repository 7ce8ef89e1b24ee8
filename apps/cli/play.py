# apps/cli/play.py
"""
Interactive Word Scramble in the terminal.

A random root word is drawn from the root-word list; type words made from its
letters. Accepted words are listed most recent first with their length, and
the score is shown after every submission.

Commands:
  :restart   new root word, score back to 0
  :quit      leave (Ctrl-D works too)
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Callable

from packages.datasets import DEFAULT_START_WORDS, load_root_words, pick_root_word, read_lines
from packages.dictionary import DEFAULT_MIN_ZIPF, create_checker, get_checker_ids
from packages.engine import WordValidator

RESTART = ":restart"
QUIT = ":quit"


def render(validator: WordValidator) -> str:
    """Text version of the game screen: root word, score, used words."""
    lines = [f"== {validator.root_word} ==   Score: {validator.score}"]
    for w in validator.used_words:
        lines.append(f"  ({len(w)}) {w}")
    return "\n".join(lines)


def play(validator: WordValidator, next_root: Callable[[], str],
         read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> int:
    """
    Run the prompt loop until :quit or EOF. Returns the final score.

    `read`/`write` are injectable so the loop can be driven without a terminal.
    """
    validator.start_round(next_root())
    write(render(validator))

    while True:
        try:
            raw = read("> ")
        except EOFError:
            break

        cmd = raw.strip().lower()
        if cmd == QUIT:
            break
        if cmd == RESTART:
            validator.start_round(next_root())
            write(render(validator))
            continue

        result = validator.submit(raw)
        if not result.ok:
            write(f"{result.title} {result.message}")
            continue
        write(f"+{result.score_delta}")
        write(render(validator))

    write(f"Final score: {validator.score}")
    return validator.score


def main():
    ap = argparse.ArgumentParser(description="Word Scramble — play in the terminal")
    ap.add_argument("--words", default=str(DEFAULT_START_WORDS), help="path to root-word list")
    ap.add_argument("--checker", default="wordfreq", choices=get_checker_ids(),
                    help="real-word checker")
    ap.add_argument("--dictionary", help="word list for --checker wordlist (one word per line)")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="Zipf frequency threshold for --checker wordfreq")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word selection")
    ap.add_argument("--log-level", default="WARNING", help="logging level (e.g. INFO, DEBUG)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.checker == "wordlist":
        if not args.dictionary:
            ap.error("--dictionary is required with --checker wordlist")
        checker = create_checker("wordlist", words=read_lines(args.dictionary))
    else:
        checker = create_checker(args.checker, min_zipf=args.min_zipf)

    root_words = load_root_words(args.words)
    rng = random.Random(args.seed)

    play(WordValidator(checker), lambda: pick_root_word(root_words, rng))


if __name__ == "__main__":
    main()

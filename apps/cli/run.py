# apps/cli/run.py
"""
CLI entry point for batch Word Scramble simulations.

This script:
  1) Validates the root-word list (prints counts + SHA).
  2) Loads the root words and a lexicon, builds the checker and the player.
  3) Plays one round per root word with a live progress indicator and writes:
       - CSV:  per-round results (score, accepted/rejected counts, words)
       - JSON: manifest with config, word-list hash, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import DEFAULT_START_WORDS, load_root_words, pretty_summary, \
    validate_root_wordlist
from packages.dictionary import DEFAULT_MIN_ZIPF, create_checker, get_checker_ids, top_words
from packages.engine import WordValidator
from packages.harness import run_batch, summarize
from packages.harness.core import DEFAULT_MAX_ATTEMPTS
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from packages.players import create_player, get_player_ids


def _load_words(path: str) -> list[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    """
    p = Path(path)
    return [w.strip().lower() for w in p.read_text(encoding="utf-8").splitlines() if w.strip()]


def _build_checker(args):
    if args.checker == "wordlist":
        if not args.dictionary:
            raise SystemExit("--dictionary is required with --checker wordlist")
        return create_checker("wordlist", words=_load_words(args.dictionary))
    return create_checker(args.checker, min_zipf=args.min_zipf)


def _plain_progress(cases):
    """Yield cases while writing a throttled one-line status to stderr."""
    total = len(cases)
    start = time.time()
    last_print = 0.0
    for idx, case in enumerate(cases, 1):
        yield case
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            last_print = now
    sys.stderr.write("\n")
    sys.stderr.flush()


def main():
    """
    Parse CLI args, validate the root list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="Word Scramble — run simulated players")
    ap.add_argument("--player", default="longest_first",
                    help=f"player id (one of: {', '.join(get_player_ids())})")
    ap.add_argument("--checker", default="wordfreq", choices=get_checker_ids(),
                    help="real-word checker")
    ap.add_argument("--dictionary", help="word list for --checker wordlist (one word per line)")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="Zipf frequency threshold for --checker wordfreq")
    ap.add_argument("--words", default=str(DEFAULT_START_WORDS),
                    help="path to root-word list")
    ap.add_argument("--lexicon",
                    help="word pool players draw from (default: wordfreq top English words)")
    ap.add_argument("--lexicon-size", type=int, default=50000,
                    help="number of wordfreq words used when --lexicon is not given")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                    help="submission budget per round")
    ap.add_argument("--sample", type=int, help="play only the first K root words")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING", help="logging level (e.g. INFO, DEBUG)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the root-word list and print a one-liner summary
    rep = validate_root_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Load inputs
    root_words = load_root_words(args.words)
    lexicon = _load_words(args.lexicon) if args.lexicon else top_words("en", args.lexicon_size)

    # 3) Build the session and the player
    validator = WordValidator(_build_checker(args))
    player = create_player(args.player)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    progress = {
        "bar": lambda cases: tqdm(cases, ncols=80, desc=player.id, unit="round"),
        "plain": _plain_progress,
        "off": None,
    }[mode]

    # 5) Play
    results = run_batch(validator, player, root_words, lexicon=lexicon,
                        max_attempts=args.max_attempts, seed=args.seed,
                        sample=args.sample, progress=progress)
    summary = summarize(results)

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "lexicon_size": len(lexicon),
        "num_rounds": len(results),
        "player_id": player.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"rounds={summary['rounds']} | mean score={summary['mean_score']:.1f} "
          f"| median={summary['median_score']:.1f} | max={summary['max_score']} "
          f"| accepted/round={summary['mean_accepted']:.2f} "
          f"| acceptance={summary['acceptance_rate']:.1%}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

"""
Simulation harness core primitives.

- play_round: let one simulated player play one root word to completion.
- run_batch:  play many root words in sequence (optionally a sample prefix).
- summarize:  aggregate a batch into headline numbers.

A round ends when the player gives up (returns None) or the attempt budget is
spent. These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests without changes.
"""

from __future__ import annotations
import time
from collections import Counter
from typing import Callable, Dict, Iterable, List

import numpy as np

from packages.engine import WordValidator

DEFAULT_MAX_ATTEMPTS = 20


def _assert_attempts(max_attempts: int) -> None:
    """Guardrail: a round needs at least one submission."""
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1; got {max_attempts}")


def play_round(
        validator: WordValidator,
        player,
        root_word: str,
        *,
        lexicon: Iterable[str],
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
) -> Dict:
    """
    Play one round until the player stops or `max_attempts` words were submitted.

    Args:
        validator:    the WordValidator to play against (its round is restarted)
        player:       an object implementing BasePlayer with next_word(state)
        root_word:    this round's root word
        lexicon:      words the player may draw candidates from
        max_attempts: submission budget
        seed:         RNG seed to make the player's choices reproducible

    Returns:
        dict with keys:
            root_word, score, accepted, rejected, attempts, time_ms,
            words (accepted, submission order), rejections (reason -> count)
    """
    _assert_attempts(max_attempts)

    player.reset(lexicon=list(lexicon), seed=seed)
    validator.start_round(root_word)

    tried: set = set()
    accepted: List[str] = []
    rejections: Counter = Counter()

    t0 = time.time()
    for _ in range(max_attempts):
        state = {
            "root_word": validator.root_word,
            "used_words": validator.used_words,
            "score": validator.score,
            "tried": tried,
        }
        word = player.next_word(state)
        if word is None:
            break

        tried.add(word)
        result = validator.submit(word)
        if result.ok:
            accepted.append(result.word)
        else:
            rejections[result.reason.name] += 1

    dt = (time.time() - t0) * 1000.0
    return {
        "root_word": validator.root_word,
        "score": validator.score,
        "accepted": len(accepted),
        "rejected": sum(rejections.values()),
        "attempts": len(tried),
        "time_ms": dt,
        "words": accepted,
        "rejections": dict(rejections),
    }


def run_batch(
        validator: WordValidator,
        player,
        root_words: List[str],
        *,
        lexicon: List[str],
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
        sample: int | None = None,
        progress: Callable[[List[str]], Iterable[str]] | None = None,
) -> List[Dict]:
    """
    Play one round per root word. If 'sample' is provided, only the first K
    root words are used to speed up quick experiments.

    Each round's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across rounds. `progress` optionally wraps
    the root-word list (e.g. with tqdm) for a live display.
    """
    _assert_attempts(max_attempts)

    pool = list(root_words)
    if sample is not None:
        pool = pool[:sample]

    iterator = progress(pool) if progress is not None else pool

    out: List[Dict] = []
    for idx, root in enumerate(iterator, start=1):
        round_seed = None if seed is None else (seed + idx)
        r = play_round(validator, player, root, lexicon=lexicon,
                       max_attempts=max_attempts, seed=round_seed)
        r["player_id"] = getattr(player, "id", "?")
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Headline numbers for a batch: rounds, mean/median/max score, mean accepted
    words per round, and the share of submissions that were accepted.
    """
    if not results:
        return {"rounds": 0, "mean_score": 0.0, "median_score": 0.0, "max_score": 0,
                "mean_accepted": 0.0, "acceptance_rate": 0.0}

    scores = np.array([r["score"] for r in results], dtype=float)
    accepted = np.array([r["accepted"] for r in results], dtype=float)
    attempts = np.array([r["attempts"] for r in results], dtype=float)

    total_attempts = attempts.sum()
    return {
        "rounds": len(results),
        "mean_score": float(scores.mean()),
        "median_score": float(np.median(scores)),
        "max_score": int(scores.max()),
        "mean_accepted": float(accepted.mean()),
        "acceptance_rate": float(accepted.sum() / total_attempts) if total_attempts else 0.0,
    }

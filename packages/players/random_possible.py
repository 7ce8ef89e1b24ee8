"""
Random Possible player.

Strategy:
  - Narrow the lexicon to words spellable from the root (once per round).
  - Submit a uniformly random one that hasn't been tried yet.
  - Give up when nothing is left.

Words are only *possible*, not necessarily real by the game's dictionary, so
this player does collect NOT_REAL rejections when the lexicon is looser than
the checker. That makes it a decent baseline for acceptance rate.
"""

from __future__ import annotations

from typing import List, Optional
from packages.engine import possible_words
from .base import BasePlayer, register


@register
class RandomPossiblePlayer(BasePlayer):
    id = "random_possible"
    name = "Random Possible"
    version = "1.0.0"

    def reset(self, *, lexicon: List[str], seed: int | None = None) -> None:
        super().reset(lexicon=lexicon, seed=seed)
        self._root: str | None = None
        self._pool: List[str] = []

    def next_word(self, state: dict) -> Optional[str]:
        """
        Args:
            state: dict with keys:
                - "root_word": the round's root word
                - "tried":     words already submitted this round (set)

        Returns:
            A lowercase word, or None when the pool is exhausted.
        """
        if state["root_word"] != self._root:
            self._root = state["root_word"]
            self._pool = possible_words(self.lexicon, self._root)

        untried = [w for w in self._pool if w not in state["tried"]]
        if not untried:
            return None
        return untried[self.rng.randrange(len(untried))]

"""
Longest First player: greedily submits the longest unused possible word,
ties broken alphabetically. Deterministic; ignores the seed.
"""

from __future__ import annotations

from typing import List, Optional
from packages.engine import possible_words
from .base import BasePlayer, register


@register
class LongestFirstPlayer(BasePlayer):
    id = "longest_first"
    name = "Longest First"
    version = "1.0.0"

    def reset(self, *, lexicon: List[str], seed: int | None = None) -> None:
        super().reset(lexicon=lexicon, seed=seed)
        self._root: str | None = None
        self._ranked: List[str] = []

    def next_word(self, state: dict) -> Optional[str]:
        if state["root_word"] != self._root:
            self._root = state["root_word"]
            self._ranked = sorted(possible_words(self.lexicon, self._root),
                                  key=lambda w: (-len(w), w))

        for w in self._ranked:
            if w not in state["tried"]:
                return w
        return None

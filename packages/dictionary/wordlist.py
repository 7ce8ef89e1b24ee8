"""
Fixed-vocabulary checker.

A word is real iff it appears in the vocabulary handed to the constructor (or
loaded from a newline-separated file). Lookups are case-insensitive. Useful for
offline play with a known dictionary and as a deterministic stand-in in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from packages.datasets.io import read_lines
from .base import DEFAULT_LANGUAGE, RealWordChecker, register


@register
class WordListChecker(RealWordChecker):
    id = "wordlist"
    name = "Word List"

    def __init__(self, words: Iterable[str] = (), language: str = DEFAULT_LANGUAGE):
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Path | str, language: str = DEFAULT_LANGUAGE) -> "WordListChecker":
        """Build a checker from a one-word-per-line file (FileNotFoundError if missing)."""
        return cls(read_lines(path), language=language)

    def __len__(self) -> int:
        return len(self._words)

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language:
            return False
        return word.strip().lower() in self._words

"""
Corpus-frequency checker backed by `wordfreq`.

A word counts as real when it is alphabetic and its Zipf frequency in the
requested language is at least `min_zipf`. Zipf is log10 of occurrences per
billion words: ~1 is extremely rare, ~3 is an everyday-but-uncommon word, and
7 is "the". Anything wordfreq has never seen scores 0.

A low threshold (the default 2.5) accepts most dictionary words while still
rejecting keyboard mash like "lsk" or "wrom".
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from wordfreq import top_n_list, zipf_frequency

from .base import DEFAULT_LANGUAGE, RealWordChecker, register

DEFAULT_MIN_ZIPF = 2.5


@lru_cache(maxsize=50000)
def _zipf(word: str, language: str) -> float:
    """Cached Zipf frequency lookup; wordfreq is comparatively slow per call."""
    return zipf_frequency(word, language)


@register
class WordfreqChecker(RealWordChecker):
    id = "wordfreq"
    name = "wordfreq Zipf threshold"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        if min_zipf < 0:
            raise ValueError(f"min_zipf must be >= 0; got {min_zipf}")
        self.min_zipf = float(min_zipf)

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        w = word.strip().lower()
        if not w.isalpha():
            return False
        return _zipf(w, language) >= self.min_zipf


def top_words(language: str = DEFAULT_LANGUAGE, n: int = 50000) -> List[str]:
    """
    The `n` most frequent words of `language` according to wordfreq, keeping
    only purely alphabetic tokens (drops numbers, contractions, punctuation).
    Handy as a lexicon for simulated players or to build a root-word list.
    """
    return [w for w in top_n_list(language, n) if w.isalpha()]

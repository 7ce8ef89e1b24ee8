from __future__ import annotations
from typing import List
from .base import DEFAULT_LANGUAGE, RealWordChecker, REGISTRY, register

from .wordlist import WordListChecker  # noqa: F401
from .frequency import WordfreqChecker, DEFAULT_MIN_ZIPF, top_words  # noqa: F401


def create_checker(checker_id: str, **kwargs) -> RealWordChecker:
    """
    Factory: instantiate a registered checker by id, passing kwargs through.
    """
    try:
        cls = REGISTRY[checker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown checker id: {checker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_checker_ids() -> List[str]:
    """
    Return all registered checker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())

from __future__ import annotations
from typing import Dict, Type

DEFAULT_LANGUAGE = "en"

# ---- Global checker registry ----
REGISTRY: Dict[str, Type["RealWordChecker"]] = {}


def register(cls: Type["RealWordChecker"]) -> Type["RealWordChecker"]:
    """
    Decorator: @register on a checker class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate checker id: {cid}")
    REGISTRY[cid] = cls
    return cls


# ---- Base class that real-word checkers inherit ----
class RealWordChecker:
    """
    Answers "is this a real word?" for the validator's last rule.
    Implementations must be synchronous and return a plain bool.
    """
    id = "base"
    name = "Base"

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")

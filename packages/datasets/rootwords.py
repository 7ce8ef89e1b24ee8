"""
Root-word source.

The game picks each round's root word at random from a newline-separated list
(`data/start.txt` ships with the package). If the list turns out empty the
game still starts, with "silkworm".
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Sequence

from .io import read_lines

logger = logging.getLogger(__name__)

DEFAULT_START_WORDS = Path(__file__).parent / "data" / "start.txt"
DEFAULT_ROOT_WORD = "silkworm"


def load_root_words(path: Path | str = DEFAULT_START_WORDS) -> List[str]:
    """
    Read the root-word list, lower-cased with blanks dropped.
    A missing file raises FileNotFoundError; there is nothing sensible to play
    without it.
    """
    words = [w.strip().lower() for w in read_lines(path) if w.strip()]
    logger.info("loaded %d root words from %s", len(words), path)
    return words


def pick_root_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """Random root word from `words`, or DEFAULT_ROOT_WORD when there are none."""
    if not words:
        return DEFAULT_ROOT_WORD
    rng = rng or random.Random()
    return rng.choice(list(words))

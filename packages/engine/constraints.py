"""
Letter-availability rules.

Given:
  - a root word (the letters the player is allowed to spend)
  - a candidate word

Decide whether the candidate can be spelled from the root's letters, where each
letter of the root can be used at most as many times as it appears in it.

`possible_words` applies the same check (plus the cheap length / same-as-root
rules) over a whole lexicon. Simulated players use it to narrow their pool.
"""

from typing import Iterable, List, Set

MIN_WORD_LENGTH = 3


def normalize(word: str) -> str:
    """Lower-case and trim surrounding whitespace. Same input -> same output."""
    return word.strip().lower()


def is_possible(word: str, root: str) -> bool:
    """
    Return True if every letter of `word` can be taken from `root`.

    Greedy consumption: walk the candidate letter by letter and remove one
    matching occurrence from a working copy of the root. A letter with no
    remaining occurrence fails the check.

    Examples:
      is_possible("silent", "listen")   -> True
      is_possible("miss", "silkworm")   -> False   (only one 's')
    """
    remaining = list(root)
    for letter in word:
        try:
            remaining.remove(letter)
        except ValueError:
            return False
    return True


def possible_words(words: Iterable[str], root: str, min_length: int = MIN_WORD_LENGTH) -> List[str]:
    """
    Keep only words that are long enough, differ from `root`, and can be spelled
    from its letters.

    Args:
      words      : iterable of candidate words (any case / whitespace)
      root       : the round's root word
      min_length : shortest acceptable word

    Returns:
      List[str] of normalized words, de-duplicated, order preserved.
    """
    root = normalize(root)
    seen: Set[str] = set()
    out: List[str] = []

    for w in words:
        w = normalize(w)

        if len(w) < min_length or w == root or w in seen:
            continue
        seen.add(w)

        if is_possible(w, root):
            out.append(w)

    return out

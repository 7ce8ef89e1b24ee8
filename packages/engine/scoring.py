"""
Word Scramble scoring for a single accepted word.

Points depend only on how long the accepted word is compared to the root:
  - same length as the root (a full anagram) : 20
  - one letter shorter than the root         : 10
  - 4+ letters but shorter than that         :  5
  - anything else (3-letter words)           :  3

Candidates can never be longer than the root (the letter check caps them), so
the fallback branch only ever scores 3-letter words.
"""

FULL_ANAGRAM_POINTS = 20
NEAR_ANAGRAM_POINTS = 10
MEDIUM_WORD_POINTS = 5
SHORT_WORD_POINTS = 3


def score_for(length: int, root_length: int) -> int:
    """
    Return the points awarded for an accepted word of `length` letters.

    Examples:
      score_for(6, 6) -> 20   ("silent" from "listen")
      score_for(5, 6) -> 10
      score_for(4, 6) -> 5    ("line" from "listen")
      score_for(3, 6) -> 3
    """
    if length == root_length:
        return FULL_ANAGRAM_POINTS
    if length == root_length - 1:
        return NEAR_ANAGRAM_POINTS
    if 4 <= length < root_length:
        return MEDIUM_WORD_POINTS
    return SHORT_WORD_POINTS

"""
Submission validation and round state.

This module answers the question: "Does this word count, and what is it worth?"
A candidate is accepted iff, checked in this order:
  1. it has at least 3 letters (after normalization)
  2. it is not the root word itself
  3. it has not been accepted already this round
  4. it can be spelled from the root word's letters
  5. the dictionary capability says it is a real word

The first failing rule decides the rejection reason; later rules are not run
(so a made-up word that is also too short is reported as too short, and the
dictionary is never consulted for it).

Rejections are plain values carrying a title/message pair for display. They
are never raised.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from packages.dictionary.base import DEFAULT_LANGUAGE, RealWordChecker
from .constraints import MIN_WORD_LENGTH, is_possible, normalize
from .scoring import score_for

logger = logging.getLogger(__name__)


class RejectionReason(enum.Enum):
    """Why a candidate was refused, with the text shown to the player."""

    TOO_SHORT = ("I see what you did here!", "Your word is too short. Try harder!")
    SAME_AS_ROOT = ("Nice try!", "Your word is the same as our root word. Easy points are not allowed!")
    ALREADY_USED = ("Word used already!", "Be more original.")
    NOT_POSSIBLE = ("Word not possible!", "You can't spell that word from '{root}'.")
    NOT_REAL = ("Word not recognized!", "You can't just make them up, you know!")

    @property
    def title(self) -> str:
        return self.value[0]

    def message(self, root_word: str = "") -> str:
        return self.value[1].format(root=root_word)


@dataclass(frozen=True)
class Accepted:
    word: str
    score_delta: int
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason
    word: str
    title: str
    message: str
    ok: bool = field(default=False, init=False)


SubmitResult = Union[Accepted, Rejected]


@dataclass
class SessionState:
    """Everything a front end needs to draw the current round."""
    root_word: str = ""
    used_words: List[str] = field(default_factory=list)  # most recent first
    score: int = 0
    last_error: Optional[RejectionReason] = None


class WordValidator:
    """
    Owns one game session: the root word, the words accepted so far and the
    running score.

    Args:
        checker:  real-word lookup capability (anything with
                  `is_real(word, language) -> bool`)
        language: language code passed to the checker
    """

    def __init__(self, checker: RealWordChecker, *, language: str = DEFAULT_LANGUAGE):
        self.checker = checker
        self.language = language
        self._state = SessionState()
        self._started = False

    # ---- read accessors for the presentation layer ----

    @property
    def root_word(self) -> str:
        return self._state.root_word

    @property
    def used_words(self) -> List[str]:
        return list(self._state.used_words)

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def last_error(self) -> Optional[RejectionReason]:
        return self._state.last_error

    @property
    def state(self) -> SessionState:
        """A copy of the session state (mutating it has no effect on the round)."""
        s = self._state
        return SessionState(s.root_word, list(s.used_words), s.score, s.last_error)

    # ---- operations ----

    def start_round(self, root_word: str) -> None:
        """
        Begin a new round with `root_word`: clears used words and resets the
        score to 0 regardless of prior state.
        """
        root = normalize(root_word)
        if not root:
            raise ValueError("root word must be a non-empty string")

        self._state = SessionState(root_word=root)
        self._started = True
        logger.info("round started with root word %r", root)

    def submit(self, candidate: str) -> SubmitResult:
        """
        Run the ordered rule checks on `candidate`.

        Returns:
            Accepted(word, score_delta) when every rule passes; the word is
            prepended to used_words and the score grows by score_delta.
            Rejected(reason, word, title, message) otherwise; state is unchanged
            apart from last_error.
        """
        if not self._started:
            raise RuntimeError("start_round() must be called before submit()")

        word = normalize(candidate)
        reason = self._first_failure(word)

        if reason is not None:
            self._state.last_error = reason
            logger.debug("rejected %r: %s", word, reason.name)
            return Rejected(
                reason=reason,
                word=word,
                title=reason.title,
                message=reason.message(self._state.root_word),
            )

        # Compute before mutating so both updates land together.
        delta = score_for(len(word), len(self._state.root_word))
        self._state.used_words.insert(0, word)
        self._state.score += delta
        self._state.last_error = None
        logger.debug("accepted %r (+%d, score=%d)", word, delta, self._state.score)
        return Accepted(word=word, score_delta=delta)

    def _first_failure(self, word: str) -> Optional[RejectionReason]:
        root = self._state.root_word

        if len(word) < MIN_WORD_LENGTH:
            return RejectionReason.TOO_SHORT
        if word == root:
            return RejectionReason.SAME_AS_ROOT
        if word in self._state.used_words:
            return RejectionReason.ALREADY_USED
        if not is_possible(word, root):
            return RejectionReason.NOT_POSSIBLE
        if not self.checker.is_real(word, self.language):
            return RejectionReason.NOT_REAL
        return None

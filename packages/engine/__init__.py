from .scoring import score_for
from .constraints import normalize, is_possible, possible_words
from .validation import (
    Accepted,
    Rejected,
    RejectionReason,
    SessionState,
    WordValidator,
)

__all__ = [
    "score_for", "normalize", "is_possible", "possible_words",
    "Accepted", "Rejected", "RejectionReason", "SessionState", "WordValidator",
]

import logging

import pytest
from packages.dictionary import WordListChecker
from packages.engine import Accepted, Rejected, RejectionReason, WordValidator

VOCAB = ["silent", "line", "tile", "lens", "inlet", "net", "tin", "listen",
         "milk", "silk", "worm", "worms", "miss", "slim"]


@pytest.fixture
def validator():
    v = WordValidator(WordListChecker(VOCAB))
    v.start_round("listen")
    return v


def test_full_anagram_scores_20(validator):
    r = validator.submit("silent")
    assert isinstance(r, Accepted)
    assert r.ok is True
    assert (r.word, r.score_delta) == ("silent", 20)
    assert validator.score == 20
    assert validator.used_words == ["silent"]

def test_four_letter_word_scores_5(validator):
    r = validator.submit("line")
    assert r.ok and r.score_delta == 5

@pytest.mark.parametrize("word,delta", [("inlet", 10), ("net", 3)])
def test_other_buckets(validator, word, delta):
    assert validator.submit(word).score_delta == delta

def test_used_words_most_recent_first_and_score_accumulates(validator):
    for w in ["line", "tile", "silent"]:
        assert validator.submit(w).ok
    assert validator.used_words == ["silent", "tile", "line"]
    assert validator.score == 5 + 5 + 20

def test_candidate_is_normalized(validator):
    r = validator.submit("  SILENT\n")
    assert r.ok and r.word == "silent"

@pytest.mark.parametrize("word", ["", "  ", "a", "ti", " NE "])
def test_too_short(validator, word):
    r = validator.submit(word)
    assert isinstance(r, Rejected)
    assert r.reason is RejectionReason.TOO_SHORT
    assert r.ok is False

@pytest.mark.parametrize("word", ["listen", "LISTEN", " Listen "])
def test_same_as_root(validator, word):
    assert validator.submit(word).reason is RejectionReason.SAME_AS_ROOT

def test_already_used(validator):
    assert validator.submit("tile").ok
    r = validator.submit("TILE")
    assert r.reason is RejectionReason.ALREADY_USED
    assert validator.score == 5
    assert validator.used_words == ["tile"]

def test_not_possible_message_names_root():
    v = WordValidator(WordListChecker(VOCAB))
    v.start_round("silkworm")
    r = v.submit("miss")
    assert r.reason is RejectionReason.NOT_POSSIBLE
    assert r.title == "Word not possible!"
    assert r.message == "You can't spell that word from 'silkworm'."

def test_not_real(validator):
    r = validator.submit("stien")
    assert r.reason is RejectionReason.NOT_REAL
    assert r.title == "Word not recognized!"

def test_rejection_leaves_state_unchanged_but_records_error(validator):
    validator.submit("line")
    before = validator.state
    r = validator.submit("zzz")
    assert r.reason is RejectionReason.NOT_POSSIBLE
    assert validator.last_error is RejectionReason.NOT_POSSIBLE
    assert validator.used_words == before.used_words
    assert validator.score == before.score
    validator.submit("tile")
    assert validator.last_error is None

def test_rule_order_short_before_possible(validator):
    # 'zz' is both too short and not spellable: the first rule wins
    assert validator.submit("zz").reason is RejectionReason.TOO_SHORT

def test_dictionary_not_consulted_when_earlier_rule_fails():
    calls = []

    class Recorder(WordListChecker):
        def is_real(self, word, language="en"):
            calls.append((word, language))
            return super().is_real(word, language)

    v = WordValidator(Recorder(VOCAB))
    v.start_round("listen")
    v.submit("zzzz")
    v.submit("no")
    assert calls == []
    v.submit("tile")
    assert calls == [("tile", "en")]

def test_start_round_resets_everything(validator):
    validator.submit("silent")
    validator.submit("zzz")
    validator.start_round("Silkworm ")
    assert validator.root_word == "silkworm"
    assert validator.used_words == []
    assert validator.score == 0
    assert validator.last_error is None
    # a word used last round is fresh again
    validator.start_round("listen")
    assert validator.submit("silent").ok

def test_state_is_a_copy(validator):
    validator.submit("line")
    s = validator.state
    s.used_words.append("bogus")
    s.score = 999
    assert validator.used_words == ["line"]
    assert validator.score == 5

def test_blank_root_word_rejected():
    v = WordValidator(WordListChecker(VOCAB))
    with pytest.raises(ValueError):
        v.start_round("   ")

def test_submit_before_round_raises():
    v = WordValidator(WordListChecker(VOCAB))
    with pytest.raises(RuntimeError):
        v.submit("line")

def test_language_is_passed_to_checker():
    v = WordValidator(WordListChecker(VOCAB, language="en"), language="fr")
    v.start_round("listen")
    assert v.submit("line").reason is RejectionReason.NOT_REAL

def test_logs_decisions(validator, caplog):
    with caplog.at_level(logging.DEBUG, logger="packages.engine.validation"):
        validator.submit("line")
        validator.submit("zzz")
    text = caplog.text
    assert "accepted 'line'" in text
    assert "NOT_POSSIBLE" in text

from pathlib import Path

import pytest
from packages.dictionary import (
    WordListChecker, WordfreqChecker, create_checker, get_checker_ids, top_words,
)
from packages.dictionary import frequency


def test_wordlist_checker_case_insensitive():
    c = WordListChecker(["Silent", " line ", ""])
    assert len(c) == 2
    assert c.is_real("silent") is True
    assert c.is_real("LINE", "en") is True
    assert c.is_real("tile") is False

def test_wordlist_checker_other_language_is_unknown():
    c = WordListChecker(["line"])
    assert c.is_real("line", "de") is False

def test_wordlist_checker_from_file(tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("milk\nsilk\n\nworm\n", encoding="utf-8")
    c = WordListChecker.from_file(p)
    assert c.is_real("worm") and not c.is_real("wrom")

def test_wordlist_checker_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordListChecker.from_file(tmp_path / "nope.txt")


@pytest.fixture
def fake_zipf(monkeypatch):
    table = {("silent", "en"): 4.1, ("inlet", "en"): 2.9, ("stien", "en"): 0.0,
             ("lenis", "en"): 1.2}
    monkeypatch.setattr(frequency, "zipf_frequency", lambda w, lang: table.get((w, lang), 0.0))
    frequency._zipf.cache_clear()
    yield table
    frequency._zipf.cache_clear()

def test_wordfreq_checker_threshold(fake_zipf):
    c = WordfreqChecker(min_zipf=2.5)
    assert c.is_real("silent") is True
    assert c.is_real(" Inlet ") is True
    assert c.is_real("lenis") is False
    assert c.is_real("stien") is False

def test_wordfreq_checker_zero_threshold_still_needs_letters(fake_zipf):
    c = WordfreqChecker(min_zipf=0)
    assert c.is_real("stien") is True
    assert c.is_real("don't") is False
    assert c.is_real("") is False

def test_wordfreq_checker_rejects_negative_threshold():
    with pytest.raises(ValueError):
        WordfreqChecker(min_zipf=-1)

def test_top_words_keeps_alphabetic(monkeypatch):
    monkeypatch.setattr(frequency, "top_n_list", lambda lang, n: ["the", "2", "don't", "silk"][:n])
    assert top_words("en", 4) == ["the", "silk"]

def test_registry_and_factory():
    assert get_checker_ids() == ["wordfreq", "wordlist"]
    c = create_checker("wordlist", words=["milk"])
    assert isinstance(c, WordListChecker) and c.is_real("milk")
    assert isinstance(create_checker("wordfreq", min_zipf=3.0), WordfreqChecker)
    with pytest.raises(ValueError, match="Unknown checker id"):
        create_checker("hunspell")

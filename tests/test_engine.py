import pytest
from packages.engine import score_for, normalize, is_possible, possible_words

# --- scoring table (root length 6 and 8) ---
@pytest.mark.parametrize("length,root_length,expected", [
    (6, 6, 20),
    (5, 6, 10),
    (4, 6, 5),
    (3, 6, 3),
    (8, 8, 20),
    (7, 8, 10),
    (6, 8, 5),
    (4, 8, 5),
    (3, 8, 3),
    (4, 5, 10),  # one-shorter wins over the 4+ bucket
    (3, 4, 10),
])
def test_score_for_table(length, root_length, expected):
    assert score_for(length, root_length) == expected

@pytest.mark.parametrize("raw,expected", [
    ("Silent", "silent"),
    ("  line \n", "line"),
    ("\tWORM", "worm"),
    ("", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected
    assert normalize(raw) == normalize(raw)

@pytest.mark.parametrize("word,root,expected", [
    ("silent", "listen", True),
    ("line", "listen", True),
    ("tile", "listen", True),
    ("miss", "silkworm", False),   # only one 's'
    ("silks", "silkworm", False),
    ("milk", "silkworm", True),
    ("zoo", "silkworm", False),    # 'z' absent
    ("listens", "listen", False),  # longer than the root
    ("", "listen", True),
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected

def test_possible_words_filters_and_dedupes():
    words = ["Milk", "worm", "miss", "SILKWORM", "ok", "milk", "worms", "zoo"]
    out = possible_words(words, "silkworm")
    assert out == ["milk", "worm", "worms"]

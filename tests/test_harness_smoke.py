import csv
import json
from pathlib import Path

import pytest
from packages.dictionary import WordListChecker
from packages.engine import WordValidator
from packages.harness import play_round, run_batch, summarize, write_csv, write_manifest
from packages.players import create_player, get_player_ids

LEXICON = ["silent", "line", "tile", "lens", "inlet", "net", "tin", "stien",
           "milk", "silk", "worm", "worms", "miss", "slim"]
DICTIONARY = [w for w in LEXICON if w != "stien"]


def _validator():
    return WordValidator(WordListChecker(DICTIONARY))


def test_longest_first_round():
    player = create_player("longest_first")
    r = play_round(_validator(), player, "listen", lexicon=LEXICON, max_attempts=20)
    # every possible word gets tried once; only 'stien' is not real
    assert r["words"][:2] == ["silent", "inlet"]
    assert r["accepted"] == 7 and r["rejected"] == 1
    assert r["rejections"] == {"NOT_REAL": 1}
    assert r["attempts"] == 8
    assert r["score"] == 20 + 10 + 5 + 5 + 5 + 3 + 3

def test_attempt_budget_stops_round():
    player = create_player("longest_first")
    r = play_round(_validator(), player, "listen", lexicon=LEXICON, max_attempts=2)
    assert r["attempts"] == 2 and r["score"] == 30

def test_random_possible_is_reproducible():
    a = play_round(_validator(), create_player("random_possible"), "silkworm",
                   lexicon=LEXICON, seed=5)
    b = play_round(_validator(), create_player("random_possible"), "silkworm",
                   lexicon=LEXICON, seed=5)
    assert a["words"] == b["words"]
    assert sorted(a["words"]) == ["milk", "silk", "slim", "worm", "worms"]

def test_invalid_attempt_budget():
    with pytest.raises(ValueError):
        play_round(_validator(), create_player("longest_first"), "listen",
                   lexicon=LEXICON, max_attempts=0)

def test_run_batch_summary_and_reports(tmp_path: Path):
    seen = []

    def progress(cases):
        seen.extend(cases)
        return cases

    results = run_batch(_validator(), create_player("random_possible"),
                        ["listen", "silkworm", "notebook"], lexicon=LEXICON,
                        seed=1, sample=2, progress=progress)
    assert seen == ["listen", "silkworm"]
    assert [r["root_word"] for r in results] == ["listen", "silkworm"]
    assert all(r["player_id"] == "random_possible" for r in results)

    s = summarize(results)
    assert s["rounds"] == 2
    assert s["max_score"] == max(r["score"] for r in results)
    assert 0.0 < s["acceptance_rate"] <= 1.0

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["root_word"] for row in rows] == ["listen", "silkworm"]
    assert rows[0]["player"] == "random_possible"

    m = write_manifest({"summary": s}, str(tmp_path / "out" / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8"))["summary"]["rounds"] == 2

def test_summarize_empty():
    assert summarize([])["rounds"] == 0

def test_player_registry():
    assert get_player_ids() == ["longest_first", "random_possible"]
    with pytest.raises(ValueError, match="Unknown player id"):
        create_player("oracle")

"""
test_score_store.py
-------------------
Unit tests for best-score persistence.

Responsibilities
----------------
- Verify the JSON-file store round-trips values across instances.
- Ensure corrupt or unreadable files never stop the game.
- Validate defensive parsing of stored best scores.
"""

import json

import pytest

from comet_dodge.core.services.score_store import (
    MemoryScoreStore,
    ScoreStore,
    parse_best,
    read_best,
    write_best,
)


# ===========================================================
# File Store
# ===========================================================

def test_missing_file_is_empty(tmp_path):
    store = ScoreStore(str(tmp_path / "best.json"))

    assert store.get("comet-best") is None


def test_set_writes_through_to_disk(tmp_path):
    path = tmp_path / "best.json"
    store = ScoreStore(str(path))

    store.set("comet-best", "75")

    assert json.loads(path.read_text(encoding="utf-8")) == {"comet-best": "75"}
    assert ScoreStore(str(path)).get("comet-best") == "75"


def test_corrupt_file_reads_as_empty(tmp_path):
    path = tmp_path / "best.json"
    path.write_text("{not json", encoding="utf-8")

    store = ScoreStore(str(path))

    assert store.get("comet-best") is None


def test_non_object_file_reads_as_empty(tmp_path):
    path = tmp_path / "best.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert ScoreStore(str(path)).get("comet-best") is None


def test_unwritable_path_keeps_value_in_memory(tmp_path):
    store = ScoreStore(str(tmp_path / "missing_dir" / "best.json"))

    store.set("comet-best", "12")

    assert store.get("comet-best") == "12"


def test_numeric_values_on_disk_are_returned_as_strings(tmp_path):
    path = tmp_path / "best.json"
    path.write_text(json.dumps({"comet-best": 88}), encoding="utf-8")

    assert ScoreStore(str(path)).get("comet-best") == "88"


# ===========================================================
# Best Score Parsing
# ===========================================================

@pytest.mark.parametrize("raw, expected", [
    (None, 0),
    ("75", 75),
    ("75.9", 75),
    ("", 0),
    ("abc", 0),
    ("nan", 0),
    ("inf", 0),
    ("-5", 0),
])
def test_parse_best(raw, expected):
    assert parse_best(raw) == expected


def test_read_and_write_best_use_best_key():
    store = MemoryScoreStore()

    write_best(store, 64)

    assert store.get("comet-best") == "64"
    assert read_best(store) == 64

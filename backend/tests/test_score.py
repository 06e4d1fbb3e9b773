"""Tests for the score ledger."""
import json
import logging
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from hebrew_train.models.score import ScoreRecord, calculate_percentage
from hebrew_train.services.score import ScoreLedger, format_score, score_color
from hebrew_train.services.state_persistence import InMemoryKeyValueStore, JsonFileKeyValueStore

STORAGE_KEY = "hebrew-train-stats"


def fixed_clock():
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FailingStore:
    """Store whose every operation raises."""

    def get(self, key):
        raise OSError("storage unavailable")

    def set(self, key, value):
        raise OSError("storage full")


class TestPercentage:
    def test_rounding(self):
        """Percentages round half up and are 0 with no answers."""
        test_cases = [
            (0, 0, 0),
            (1, 3, 33),
            (2, 3, 67),
            (1, 2, 50),
            (1, 8, 13),   # 12.5 rounds up
            (999, 1000, 100),
        ]
        for correct, total, expected in test_cases:
            assert calculate_percentage(correct, total) == expected

    def test_record_rejects_more_correct_than_total(self):
        """A record cannot have more correct answers than total."""
        with pytest.raises(ValidationError):
            ScoreRecord(correct=3, total=2)

    def test_record_percentage_follows_counts(self):
        """The percentage is worked out from the counts, whatever was passed in."""
        assert ScoreRecord(correct=1, total=3).percentage == 33
        assert ScoreRecord(correct=1, total=3, percentage=90).percentage == 33
        assert ScoreRecord(correct=1, total=3).model_dump() == {"correct": 1, "total": 3, "percentage": 33}


class TestScoreLedger:
    """Tests for counting answers."""

    def test_one_correct_two_incorrect(self):
        """One correct and two wrong answers score 33%."""
        ledger = ScoreLedger(InMemoryKeyValueStore(), "letter-choice", clock=fixed_clock)
        ledger.add_correct()
        ledger.add_incorrect()
        ledger.add_incorrect()
        stats = ledger.game_stats
        assert (stats.correct, stats.total, stats.percentage) == (1, 3, 33)
        assert ledger.current_correct == 1
        assert ledger.current_total == 3
        assert ledger.current_percentage == 33

    def test_persisted_format(self):
        """Stats are stored as one JSON object with lastSession."""
        store = InMemoryKeyValueStore()
        ledger = ScoreLedger(store, "word-choice", clock=fixed_clock)
        ledger.record(True)
        data = json.loads(store.get(STORAGE_KEY))
        assert data == {
            "word-choice": {"correct": 1, "total": 1, "percentage": 100},
            "lastSession": "2024-05-01T12:00:00+00:00",
        }

    def test_stats_survive_new_ledger(self):
        """A new ledger picks up stored stats but starts a fresh session."""
        store = InMemoryKeyValueStore()
        ScoreLedger(store, "anagram").record(True)
        ledger = ScoreLedger(store, "anagram")
        assert ledger.game_stats.correct == 1
        assert ledger.current_total == 0

    def test_stored_record_without_percentage(self):
        """Records stored without a percentage get it from their counts."""
        store = InMemoryKeyValueStore({STORAGE_KEY: json.dumps({"anagram": {"correct": 1, "total": 3}})})
        ledger = ScoreLedger(store, "anagram")
        assert ledger.game_stats.percentage == 33

    def test_stored_percentage_is_recomputed(self):
        """A stale stored percentage is replaced by the one from the counts."""
        stored = {"anagram": {"correct": 1, "total": 4, "percentage": 99}}
        ledger = ScoreLedger(InMemoryKeyValueStore({STORAGE_KEY: json.dumps(stored)}), "anagram")
        assert ledger.game_stats.percentage == 25

    def test_total_stats_across_games(self):
        """Totals sum over every game type."""
        store = InMemoryKeyValueStore()
        ledger = ScoreLedger(store, "letter-choice")
        ledger.add_correct()
        ledger.game_type = "word-input"
        ledger.add_incorrect()
        total = ledger.total_stats
        assert (total.correct, total.total, total.percentage) == (1, 2, 50)

    def test_no_game_type_counts_session_only(self):
        """Without a game type only session counters move."""
        store = InMemoryKeyValueStore()
        ledger = ScoreLedger(store)
        ledger.add_correct()
        assert ledger.current_total == 1
        assert store.get(STORAGE_KEY) is None
        assert ledger.game_stats.total == 0

    def test_reset_game_stats(self):
        """Resetting one game type removes its record."""
        ledger = ScoreLedger(InMemoryKeyValueStore(), "letter-input")
        ledger.add_correct()
        ledger.reset_game_stats("letter-input")
        assert ledger.game_stats.total == 0

    def test_reset_all_stats(self):
        """Resetting everything clears stored stats and session counters."""
        store = InMemoryKeyValueStore()
        ledger = ScoreLedger(store, "letter-input")
        ledger.add_correct()
        ledger.reset_all_stats()
        assert ledger.total_stats.total == 0
        assert ledger.current_total == 0
        assert json.loads(store.get(STORAGE_KEY)) == {}

    def test_reset_current_score_keeps_persisted(self):
        """Resetting the session leaves stored stats alone."""
        ledger = ScoreLedger(InMemoryKeyValueStore(), "letter-input")
        ledger.add_correct()
        ledger.reset_current_score()
        assert ledger.current_total == 0
        assert ledger.game_stats.total == 1


class TestStorageFailures:
    """Storage errors are logged, never raised."""

    def test_failing_store(self, caplog):
        """Failing reads and writes are logged and the ledger keeps counting."""
        with caplog.at_level(logging.WARNING):
            ledger = ScoreLedger(FailingStore(), "letter-choice")
            ledger.add_correct()
        assert ledger.game_stats.correct == 1
        assert "Error saving" in caplog.text
        assert "Error loading" in caplog.text

    def test_corrupt_data(self):
        """Unparseable stored data starts from empty stats."""
        store = InMemoryKeyValueStore({STORAGE_KEY: "{broken"})
        ledger = ScoreLedger(store, "letter-choice")
        assert ledger.total_stats.total == 0

    def test_invalid_record(self, caplog):
        """An invalid record is dropped; the other records survive the next save."""
        stored = {
            "letter-choice": {"correct": 10, "total": 20, "percentage": 50},
            "anagram": {"correct": 5, "total": 1},
            "lastSession": "2024-04-30T09:00:00+00:00",
        }
        store = InMemoryKeyValueStore({STORAGE_KEY: json.dumps(stored)})
        with caplog.at_level(logging.WARNING):
            ledger = ScoreLedger(store, "anagram", clock=fixed_clock)
        assert "anagram" in caplog.text
        assert ledger.game_stats.total == 0
        assert ledger.last_session == "2024-04-30T09:00:00+00:00"

        ledger.add_correct()
        data = json.loads(store.get(STORAGE_KEY))
        assert data["letter-choice"] == {"correct": 10, "total": 20, "percentage": 50}
        assert data["anagram"] == {"correct": 1, "total": 1, "percentage": 100}
        assert data["lastSession"] == "2024-05-01T12:00:00+00:00"

    def test_json_file_store(self, tmp_path):
        """Stats written to a JSON file are read back by a new ledger."""
        store = JsonFileKeyValueStore(tmp_path / "nested" / "stats.json")
        ScoreLedger(store, "matching").add_incorrect()
        ledger = ScoreLedger(JsonFileKeyValueStore(tmp_path / "nested" / "stats.json"), "matching")
        assert ledger.game_stats.total == 1


class TestFormatting:
    def test_format_score(self):
        """Scores are shown as count, total and percentage."""
        assert format_score(15, 20) == "✓ 15 / 20 (75%)"
        assert format_score(0, 0) == "✓ 0 / 0 (0%)"

    def test_score_color(self):
        """Percentages map to success, warning and danger bands."""
        assert score_color(80) == "success"
        assert score_color(79) == "warning"
        assert score_color(60) == "warning"
        assert score_color(59) == "danger"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

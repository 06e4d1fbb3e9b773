"""
Score ledger - session counters plus persisted per-game statistics.

Statistics are stored as JSON under a single key of an injected KeyValueStore.
Storage failures are logged and never interrupt a game: the in-memory
statistics stay authoritative for the rest of the process.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from hebrew_train.config import get_settings
from hebrew_train.models.round import GameType
from hebrew_train.models.score import GameStats, ScoreRecord, calculate_percentage
from hebrew_train.services.state_persistence import KeyValueStore

logger = logging.getLogger(__name__)


def format_score(correct: int, total: int) -> str:
    """Format as "✓ 15 / 20 (75%)"."""
    return f"✓ {correct} / {total} ({calculate_percentage(correct, total)}%)"


def score_color(percentage: int) -> str:
    if percentage >= 80:
        return "success"
    if percentage >= 60:
        return "warning"
    return "danger"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ScoreLedger:
    """Counts answers for one game type at a time."""

    def __init__(
        self,
        store: KeyValueStore,
        game_type: Optional[GameType] = None,
        storage_key: Optional[str] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._store = store
        self.game_type = game_type
        self.storage_key = storage_key or get_settings().STORAGE_KEY
        self._clock = clock
        self.current_correct = 0
        self.current_total = 0
        self._stats = self._load()

    def _load(self) -> GameStats:
        try:
            raw = self._store.get(self.storage_key)
            if not raw:
                return GameStats()
            return GameStats.from_storage(json.loads(raw))
        except Exception as exc:
            logger.warning("Error loading %s from storage: %s", self.storage_key, exc)
            return GameStats()

    def _save(self) -> None:
        try:
            self._store.set(self.storage_key, json.dumps(self._stats.to_storage(), ensure_ascii=False))
        except Exception as exc:
            logger.warning("Error saving %s to storage: %s", self.storage_key, exc)

    def _update(self, is_correct: bool) -> None:
        if self.game_type is None:
            return
        record = self._stats.games.get(self.game_type, ScoreRecord())
        correct = record.correct + (1 if is_correct else 0)
        self._stats.games[self.game_type] = ScoreRecord.from_counts(correct, record.total + 1)
        self._stats.last_session = self._clock().isoformat()
        self._save()

    def add_correct(self) -> None:
        self.current_correct += 1
        self.current_total += 1
        self._update(True)

    def add_incorrect(self) -> None:
        self.current_total += 1
        self._update(False)

    def record(self, is_correct: bool) -> None:
        if is_correct:
            self.add_correct()
        else:
            self.add_incorrect()

    @property
    def current_percentage(self) -> int:
        return calculate_percentage(self.current_correct, self.current_total)

    @property
    def game_stats(self) -> ScoreRecord:
        """Persisted record for the current game type."""
        if self.game_type is None:
            return ScoreRecord()
        return self._stats.games.get(self.game_type, ScoreRecord()).model_copy()

    @property
    def total_stats(self) -> ScoreRecord:
        """Sum over every game type."""
        correct = sum(record.correct for record in self._stats.games.values())
        total = sum(record.total for record in self._stats.games.values())
        return ScoreRecord.from_counts(correct, total)

    @property
    def all_stats(self) -> GameStats:
        return self._stats.model_copy(deep=True)

    @property
    def last_session(self) -> Optional[str]:
        return self._stats.last_session

    def reset_current_score(self) -> None:
        self.current_correct = 0
        self.current_total = 0

    def reset_all_stats(self) -> None:
        self._stats = GameStats()
        self._save()
        self.reset_current_score()

    def reset_game_stats(self, game_type: GameType) -> None:
        self._stats.games.pop(game_type, None)
        self._save()

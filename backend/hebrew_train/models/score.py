import logging
import math
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, computed_field, model_validator

logger = logging.getLogger(__name__)


def calculate_percentage(correct: int, total: int) -> int:
    """Whole-number percentage, rounding halves up. 0 when nothing was answered."""
    if total == 0:
        return 0
    return int(math.floor(correct / total * 100 + 0.5))


class ScoreRecord(BaseModel):
    """Correct/total counters for one game type."""
    correct: int = 0
    total: int = 0

    @model_validator(mode="after")
    def check_counts(self) -> "ScoreRecord":
        if self.correct < 0 or self.correct > self.total:
            raise ValueError(f"correct ({self.correct}) must be between 0 and total ({self.total})")
        return self

    @computed_field
    @property
    def percentage(self) -> int:
        return calculate_percentage(self.correct, self.total)

    @classmethod
    def from_counts(cls, correct: int, total: int) -> "ScoreRecord":
        return cls(correct=correct, total=total)


class GameStats(BaseModel):
    """Persisted statistics: one record per game type plus the last session time."""
    games: dict[str, ScoreRecord] = {}
    last_session: Optional[str] = Field(default=None, alias="lastSession")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_storage(cls, data: dict) -> "GameStats":
        """
        Build from the stored mapping {game_type: record, ..., "lastSession": iso}.

        Records that fail validation are logged and dropped; the rest are kept.
        """
        games = {}
        for key, value in data.items():
            if key == "lastSession":
                continue
            try:
                games[key] = ScoreRecord.model_validate(value)
            except ValidationError as exc:
                logger.warning("Skipping invalid score record for %s: %s", key, exc)

        last_session = data.get("lastSession")
        if not isinstance(last_session, str):
            last_session = None
        return cls(games=games, last_session=last_session)

    def to_storage(self) -> dict:
        data: dict = {key: record.model_dump() for key, record in self.games.items()}
        if self.last_session is not None:
            data["lastSession"] = self.last_session
        return data

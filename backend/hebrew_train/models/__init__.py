from hebrew_train.models.word import Word, Difficulty
from hebrew_train.models.round import (
    GameType,
    GAME_TYPES,
    LetterOptions,
    WordOptions,
    Options,
    AnagramTile,
    Round,
)
from hebrew_train.models.score import ScoreRecord, GameStats, calculate_percentage

__all__ = [
    "Word",
    "Difficulty",
    "GameType",
    "GAME_TYPES",
    "LetterOptions",
    "WordOptions",
    "Options",
    "AnagramTile",
    "Round",
    "ScoreRecord",
    "GameStats",
    "calculate_percentage",
]

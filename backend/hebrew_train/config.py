from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path
from typing import List

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    # Vocabulary catalog and score storage
    WORDS_PATH: Path = PACKAGE_DIR / "data" / "words.json"
    STATS_PATH: Path = Path("./data/stats.json")
    STORAGE_KEY: str = "hebrew-train-stats"

    # Deferred transitions, in seconds
    AUTO_NEXT_DELAY: float = 1.0
    MISFIRE_CLEAR_DELAY: float = 1.0

    # Round shape
    MIN_LETTER_OPTIONS: int = 4
    MAX_LETTER_OPTIONS: int = 6
    WORD_DISTRACTOR_COUNTS: List[int] = [2, 3]
    ANAGRAM_DISTRACTOR_COUNT: int = 2
    MATCHING_PAIR_COUNT: int = 3

    # Upper bound on random letter draws when filling distractors
    RANDOM_DRAW_LIMIT: int = 50

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "HEBREW_TRAIN_"


@lru_cache
def get_settings() -> Settings:
    return Settings()

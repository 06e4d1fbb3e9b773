"""
Vocabulary service - read-only access to the word catalog.

The catalog is loaded once from JSON and never mutated afterwards.
"""
import json
import logging
import random
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Sequence, TypeVar

from hebrew_train.config import get_settings
from hebrew_train.models.word import Word

logger = logging.getLogger(__name__)

T = TypeVar("T")


def shuffle_array(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """Return a shuffled copy of items. The input is left untouched."""
    rng = rng or random
    return rng.sample(list(items), len(items))


def load_words(path: Path) -> list[Word]:
    """Load words from a JSON catalog. A missing or unreadable file yields no words."""
    if not path.exists():
        logger.warning("Words catalog not found at %s", path)
        return []

    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Failed to load words catalog: %s", exc)
        return []

    return [Word(**item) for item in data]


class VocabularyRepository:
    """Random selection and filtering over a fixed list of words."""

    def __init__(self, words: Iterable[Word], rng: Optional[random.Random] = None):
        self._words: tuple[Word, ...] = tuple(words)
        self._by_id: dict[str, Word] = {word.id: word for word in self._words}
        self._rng = rng or random.Random()

    @property
    def words(self) -> list[Word]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def get(self, word_id: str) -> Optional[Word]:
        return self._by_id.get(word_id)

    def random_word(self, exclude_ids: Iterable[str] = ()) -> Optional[Word]:
        """Uniformly pick a word whose id is not excluded. None if nothing is left."""
        excluded = set(exclude_ids)
        available = [word for word in self._words if word.id not in excluded]
        if not available:
            return None
        return self._rng.choice(available)

    def by_category(self, category: str) -> list[Word]:
        return [word for word in self._words if word.category == category]

    def by_difficulty(self, difficulty: int) -> list[Word]:
        return [word for word in self._words if word.difficulty == difficulty]

    def categories(self) -> set[str]:
        return {word.category for word in self._words}

    def by_categories(self, categories: Iterable[str]) -> list[Word]:
        """Words in any of the given categories. No categories means no words."""
        wanted = set(categories)
        return [word for word in self._words if word.category in wanted]


@lru_cache
def get_vocabulary() -> VocabularyRepository:
    """Get the shared repository over the configured catalog."""
    return VocabularyRepository(load_words(get_settings().WORDS_PATH))

import random

import pytest

from hebrew_train.models.word import Word
from hebrew_train.services.vocabulary import VocabularyRepository


def make_word(word_id: str, hebrew: str, category: str = "food", difficulty: int = 1) -> Word:
    return Word(
        id=word_id,
        emoji="🔤",
        hebrew=hebrew,
        translation=word_id,
        transliteration=word_id,
        category=category,
        difficulty=difficulty,
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def words():
    return [
        make_word("apple", "תפוח", "food", 1),
        make_word("bread", "לחם", "food", 1),
        make_word("cheese", "גבינה", "food", 2),
        make_word("cat", "חתול", "animals", 1),
        make_word("dog", "כלב", "animals", 1),
        make_word("fish", "דג", "animals", 1),
        make_word("car", "מכונית", "transport", 2),
        make_word("bicycle", "אופניים", "transport", 3),
        make_word("hello", "שלום", "greetings", 1),
    ]


@pytest.fixture
def vocabulary(words, rng):
    return VocabularyRepository(words, rng=rng)

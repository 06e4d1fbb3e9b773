"""Drill services.

This package provides:
- VocabularyRepository: read-only access to the word catalog
- DistractorService: wrong answers for letter and word rounds
- RoundGenerator: one puzzle per game type
- MatchingGame: the picture/word matching board
- ScoreLedger: session and persisted statistics
- GameSession: the round loop tying the above together
"""

from .vocabulary import VocabularyRepository, get_vocabulary, load_words, shuffle_array
from .distractors import DistractorService
from .rounds import RoundGenerator
from .answers import (
    letters_equal,
    words_equal,
    anagram_equal,
    check_answer,
    generate_hint,
    word_placeholders,
)
from .matching import MatchingGame, MatchingTile
from .score import ScoreLedger, format_score, score_color
from .scheduling import Scheduler, DeferredAction, ManualScheduler, AsyncioScheduler
from .state_persistence import KeyValueStore, InMemoryKeyValueStore, JsonFileKeyValueStore
from .hebrew_input import HebrewInput
from .session import GameSession

__all__ = [
    # Vocabulary
    "VocabularyRepository",
    "get_vocabulary",
    "load_words",
    "shuffle_array",
    # Rounds
    "DistractorService",
    "RoundGenerator",
    "MatchingGame",
    "MatchingTile",
    # Answers
    "letters_equal",
    "words_equal",
    "anagram_equal",
    "check_answer",
    "generate_hint",
    "word_placeholders",
    "HebrewInput",
    # Scores
    "ScoreLedger",
    "format_score",
    "score_color",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    # Scheduling
    "Scheduler",
    "DeferredAction",
    "ManualScheduler",
    "AsyncioScheduler",
    "GameSession",
]

"""
Round generator - builds one puzzle per call for each game type.

The generator holds no round state: every call returns an independent Round,
or None while the catalog is empty.
"""
import logging
import random
from typing import Optional

from hebrew_train.config import get_settings
from hebrew_train.models.round import (
    AnagramTile,
    GameType,
    LetterOptions,
    Round,
    WordOptions,
)
from hebrew_train.models.word import Word
from hebrew_train.script import random_letter
from hebrew_train.services.distractors import DistractorService
from hebrew_train.services.vocabulary import VocabularyRepository, shuffle_array

logger = logging.getLogger(__name__)


def create_letter_tiles(letters: list[str]) -> list[AnagramTile]:
    return [AnagramTile(id=f"letter-{index}", letter=letter) for index, letter in enumerate(letters)]


class RoundGenerator:
    """Creates rounds for the single-word game types."""

    def __init__(
        self,
        vocabulary: VocabularyRepository,
        distractors: Optional[DistractorService] = None,
        rng: Optional[random.Random] = None,
    ):
        self.vocabulary = vocabulary
        self._rng = rng or random.Random()
        self.distractors = distractors or DistractorService(rng=self._rng)
        self.settings = get_settings()

    def _pick_word(self, word: Optional[Word]) -> Optional[Word]:
        if word is not None:
            return word
        picked = self.vocabulary.random_word()
        if picked is None:
            logger.debug("No words available, skipping round generation")
        return picked

    def _hide_letter(self, game_type: GameType, word: Word, position: Optional[int]) -> Round:
        letters = list(word.hebrew)
        if position is None:
            position = self._rng.randrange(len(letters))
        return Round(
            game_type=game_type,
            word=word,
            missing_position=position,
            missing_letter=letters[position],
        )

    def letter_choice_round(self, word: Optional[Word] = None, position: Optional[int] = None) -> Optional[Round]:
        """Hide one letter and offer 4-6 letter options, exactly one of them correct."""
        word = self._pick_word(word)
        if word is None:
            return None

        round_ = self._hide_letter("letter-choice", word, position)
        option_count = self._rng.randint(self.settings.MIN_LETTER_OPTIONS, self.settings.MAX_LETTER_OPTIONS)
        distractors = self.distractors.letter_distractors(round_.missing_letter, word.hebrew, option_count - 1)

        # Distractors are already unique and never the correct letter
        options = list(dict.fromkeys([round_.missing_letter, *distractors]))
        round_.options = LetterOptions(letters=shuffle_array(options, self._rng))
        return round_

    def letter_input_round(self, word: Optional[Word] = None, position: Optional[int] = None) -> Optional[Round]:
        """Hide one letter; the answer is typed."""
        word = self._pick_word(word)
        if word is None:
            return None
        return self._hide_letter("letter-input", word, position)

    def word_choice_round(self, word: Optional[Word] = None) -> Optional[Round]:
        """Show the picture and offer the word among 2 or 3 other words."""
        word = self._pick_word(word)
        if word is None:
            return None

        count = self._rng.choice(self.settings.WORD_DISTRACTOR_COUNTS)
        distractors = self.distractors.word_distractors(word, self.vocabulary.words, count)
        options = shuffle_array([word, *distractors], self._rng)
        return Round(game_type="word-choice", word=word, options=WordOptions(words=options))

    def word_input_round(self, word: Optional[Word] = None) -> Optional[Round]:
        word = self._pick_word(word)
        if word is None:
            return None
        return Round(game_type="word-input", word=word)

    def anagram_round(self, word: Optional[Word] = None, distractor_count: Optional[int] = None) -> Optional[Round]:
        """Scramble the letters of the word, mixing in a few letters it does not contain."""
        word = self._pick_word(word)
        if word is None:
            return None
        if distractor_count is None:
            distractor_count = self.settings.ANAGRAM_DISTRACTOR_COUNT

        letters = shuffle_array(list(word.hebrew), self._rng)
        existing = list(letters)
        extra = []
        for _ in range(distractor_count):
            letter = random_letter(existing, rng=self._rng)
            if letter is None:
                break
            extra.append(letter)
            existing.append(letter)

        if extra:
            letters = shuffle_array(letters + extra, self._rng)

        return Round(game_type="anagram", word=word, letters=create_letter_tiles(letters))

    def generate(self, game_type: GameType) -> Optional[Round]:
        """Create a round for the given game type."""
        if game_type == "letter-choice":
            return self.letter_choice_round()
        elif game_type == "letter-input":
            return self.letter_input_round()
        elif game_type == "word-choice":
            return self.word_choice_round()
        elif game_type == "word-input":
            return self.word_input_round()
        elif game_type == "anagram":
            return self.anagram_round()
        raise ValueError(f"{game_type} is not a single-round game type; use MatchingGame")

"""
Distractor service - builds plausible wrong answers for letter and word rounds.

Letter distractors are filled tier by tier:
1. Letters that look or sound like the correct one
2. Other letters of the same word
3. Random letters from the alphabet (bounded number of draws)
"""
import random
from typing import Optional, Sequence

from hebrew_train.config import get_settings
from hebrew_train.models.word import Word
from hebrew_train.script import normalize_final_letters, random_letter, similar_letters
from hebrew_train.services.vocabulary import shuffle_array


class DistractorService:
    """Generates distractors. Never pads: short results are returned as they are."""

    def __init__(self, rng: Optional[random.Random] = None, draw_limit: Optional[int] = None):
        self._rng = rng or random.Random()
        self.draw_limit = draw_limit if draw_limit is not None else get_settings().RANDOM_DRAW_LIMIT

    def letter_distractors(self, correct_letter: str, word: str, count: int) -> list[str]:
        """
        Up to `count` distinct regular-form letters, none equal to the correct letter.

        Ordered by tier: similar letters first, then letters of the word, then random ones.
        """
        if count <= 0:
            return []

        normalized_correct = normalize_final_letters(correct_letter)
        distractors: list[str] = []

        def add(letter: str) -> None:
            normalized = normalize_final_letters(letter)
            if (
                len(distractors) < count
                and normalized != normalized_correct
                and normalized not in distractors
                and not normalized.isspace()
            ):
                distractors.append(normalized)

        for letter in similar_letters(correct_letter):
            add(letter)

        for letter in word:
            add(letter)

        draws = 0
        while len(distractors) < count and draws < self.draw_limit:
            draws += 1
            letter = random_letter([normalized_correct, *distractors], rng=self._rng)
            if letter is None:
                break
            add(letter)

        return distractors

    def word_distractors(self, correct_word: Word, words: Sequence[Word], count: int) -> list[Word]:
        """
        Up to `count` other words, preferring the same category.

        The pool is shuffled before truncating so same-category words do not
        always land in the same positions.
        """
        if count <= 0:
            return []

        pool = [
            word for word in words
            if word.id != correct_word.id and word.category == correct_word.category
        ]

        if len(pool) < count:
            chosen = {word.id for word in pool}
            chosen.add(correct_word.id)
            for word in words:
                if word.id not in chosen:
                    pool.append(word)
                    chosen.add(word.id)

        # Catalogs with repeated ids must still yield unique options
        unique = list({word.id: word for word in pool}.values())
        return shuffle_array(unique, self._rng)[:count]

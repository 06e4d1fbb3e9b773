"""
Answer checking. Final letter forms compare equal to their regular forms;
there is no partial credit.
"""
from typing import Iterable, Sequence, Union

from hebrew_train.models.round import Round
from hebrew_train.script import normalize_final_letters


def letters_equal(answer: str, correct: str) -> bool:
    return normalize_final_letters(answer.strip()) == normalize_final_letters(correct.strip())


def words_equal(answer: str, correct: str) -> bool:
    """Compare whole words. Only surrounding whitespace is ignored."""
    return normalize_final_letters(answer.strip()) == normalize_final_letters(correct.strip())


def anagram_equal(selected_letters: Sequence[str], correct_word: str) -> bool:
    """The letters, joined in the order they were picked, must spell the word exactly."""
    return "".join(selected_letters) == correct_word


def check_answer(round_: Round, answer: Union[str, Sequence[str]]) -> bool:
    """
    Check an answer against a round.

    - letter-choice / letter-input: the hidden letter
    - word-choice: the id of the chosen word
    - word-input: the typed word
    - anagram: the picked letters in order
    """
    game_type = round_.game_type
    if game_type in ("letter-choice", "letter-input"):
        return isinstance(answer, str) and letters_equal(answer, round_.missing_letter or "")
    elif game_type == "word-choice":
        return answer == round_.word.id
    elif game_type == "word-input":
        return isinstance(answer, str) and words_equal(answer, round_.word.hebrew)
    elif game_type == "anagram":
        return anagram_equal(list(answer), round_.word.hebrew)
    raise ValueError(f"Cannot check answers for game type {game_type}")


def generate_hint(word: str) -> str:
    """First letter of the word, or an empty string."""
    letters = list(word)
    return letters[0] if letters else ""


def word_placeholders(word: str, revealed: Iterable[int] = ()) -> list[str]:
    """Letters at revealed positions, "_" everywhere else."""
    shown = set(revealed)
    return [letter if index in shown else "_" for index, letter in enumerate(word)]

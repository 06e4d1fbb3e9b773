"""
Hebrew script helpers - classification, final-letter normalization and the
letter confusion table used for distractors.
"""
import random
import re
from typing import Iterable, Optional

# Hebrew Unicode block plus whitespace
HEBREW_TEXT_RE = re.compile(r"^[\u0590-\u05FF\s]*$")

# Word-final letter forms mapped to their regular form
FINAL_LETTERS = {
    'ך': 'כ',
    'ם': 'מ',
    'ן': 'נ',
    'ף': 'פ',
    'ץ': 'צ',
}
_FINAL_LETTERS_TABLE = str.maketrans(FINAL_LETTERS)

HEBREW_ALPHABET = (
    'א', 'ב', 'ג', 'ד', 'ה', 'ו', 'ז', 'ח', 'ט', 'י',
    'כ', 'ל', 'מ', 'נ', 'ס', 'ע', 'פ', 'צ', 'ק', 'ר',
    'ש', 'ת',
)

# Visually or phonetically confusable letters, keyed by regular form
SIMILAR_LETTERS = {
    'ד': ['ר', 'ה', 'ת'],
    'ר': ['ד', 'ה', 'ת'],
    'ב': ['כ', 'נ', 'מ'],
    'כ': ['ב', 'נ', 'מ'],
    'ה': ['ח', 'ת', 'ד'],
    'ח': ['ה', 'ת'],
    'ת': ['ה', 'ח', 'ד'],
    'ו': ['ז', 'י'],
    'ז': ['ו', 'י'],
    'י': ['ו', 'ז'],
    'ע': ['צ'],
    'צ': ['ע'],
    'ק': ['כ'],
    'ש': ['ת'],
    'מ': ['ם', 'ב', 'כ'],
    'נ': ['ן', 'ב'],
    'פ': ['ף', 'כ'],
}


def is_hebrew_text(text: str) -> bool:
    """True if text holds only Hebrew characters and whitespace. Empty text counts."""
    if not text:
        return True
    return HEBREW_TEXT_RE.match(text) is not None


def normalize_final_letters(text: str) -> str:
    """Replace final letter forms (ך ם ן ף ץ) with their regular forms."""
    return text.translate(_FINAL_LETTERS_TABLE)


def similar_letters(letter: str) -> list[str]:
    """Confusable letters for a letter, or an empty list if none are known."""
    return list(SIMILAR_LETTERS.get(normalize_final_letters(letter), []))


def hebrew_alphabet() -> list[str]:
    """The 22 regular letters in alphabet order."""
    return list(HEBREW_ALPHABET)


def random_letter(exclude: Iterable[str] = (), rng: Optional[random.Random] = None) -> Optional[str]:
    """
    Pick a random letter whose regular form is not excluded.

    Returns None when every letter is excluded.
    """
    rng = rng or random
    excluded = {normalize_final_letters(letter) for letter in exclude}
    available = [letter for letter in HEBREW_ALPHABET if letter not in excluded]
    if not available:
        return None
    return rng.choice(available)


def split_word(word: str) -> list[str]:
    """Split a word into its letters, ignoring surrounding whitespace."""
    return list(word.strip())


def word_contains_letter(word: str, letter: str) -> bool:
    return normalize_final_letters(letter) in normalize_final_letters(word)

"""Per-round puzzle models.

A Round is owned by the caller until the next round replaces it. Options are a
tagged union so letter rounds and word rounds never share a loosely typed list.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from .word import Word

GameType = Literal[
    "letter-choice",  # pick the missing letter
    "letter-input",   # type the missing letter
    "word-choice",    # pick the word for a picture
    "word-input",     # type the whole word
    "anagram",        # assemble the word from shuffled letters
    "matching",       # match pictures to words
]

GAME_TYPES: tuple[GameType, ...] = (
    "letter-choice",
    "letter-input",
    "word-choice",
    "word-input",
    "anagram",
    "matching",
)


class LetterOptions(BaseModel):
    kind: Literal["letters"] = "letters"
    letters: list[str]


class WordOptions(BaseModel):
    kind: Literal["words"] = "words"
    words: list[Word]


Options = Annotated[Union[LetterOptions, WordOptions], Field(discriminator="kind")]


class AnagramTile(BaseModel):
    """One letter button of an anagram round."""
    id: str
    letter: str
    used: bool = False


class Round(BaseModel):
    """A single puzzle built around one word."""
    game_type: GameType
    word: Word
    missing_position: Optional[int] = None  # letter modes only
    missing_letter: Optional[str] = None
    options: Optional[Options] = None
    letters: list[AnagramTile] = []

    # Round-local answer state
    user_answer: str = ""
    is_correct: Optional[bool] = None
    attempts: int = 0

    @property
    def is_resolved(self) -> bool:
        return self.is_correct is True

    @property
    def option_count(self) -> int:
        if isinstance(self.options, LetterOptions):
            return len(self.options.letters)
        if isinstance(self.options, WordOptions):
            return len(self.options.words)
        return 0

    def display_with_gap(self, placeholder: str = "_") -> str:
        """Letters of the word separated by spaces, the hidden one replaced."""
        letters = list(self.word.hebrew)
        if self.missing_position is not None:
            letters[self.missing_position] = placeholder
        return " ".join(letters)

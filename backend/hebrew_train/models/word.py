from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Difficulty = Literal[1, 2, 3]


class Word(BaseModel):
    """A vocabulary entry. Immutable once loaded from the catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    emoji: str
    hebrew: str = Field(min_length=1)
    translation: str
    transliteration: str
    category: str
    difficulty: Difficulty = 1
    audio_url: Optional[str] = Field(default=None, alias="audioUrl")
    frequency_rank: Optional[int] = Field(default=None, alias="frequencyRank")

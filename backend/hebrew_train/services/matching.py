"""
Matching game - pair pictures (left column) with Hebrew words (right column).

Both columns carry the same tile ids, so a pair is correct when the selected
left and right ids are equal. A pair is resolved as soon as both sides have a
pending selection.
"""
import random
from typing import Callable, Literal, Optional

from pydantic import BaseModel

from hebrew_train.config import get_settings
from hebrew_train.models.word import Word
from hebrew_train.services.scheduling import DeferredAction, Scheduler
from hebrew_train.services.vocabulary import VocabularyRepository, shuffle_array

MatchingState = Literal["idle", "left-pending", "right-pending"]


class MatchingTile(BaseModel):
    id: str
    emoji: str
    hebrew: str
    matched: bool = False

    @classmethod
    def from_word(cls, word: Word) -> "MatchingTile":
        return cls(id=word.id, emoji=word.emoji, hebrew=word.hebrew)


def misfire_key(left_id: str, right_id: str) -> str:
    return f"{left_id}-{right_id}"


class MatchingGame:
    """State of one matching board. Regenerated wholesale by reset()."""

    def __init__(
        self,
        vocabulary: VocabularyRepository,
        pair_count: Optional[int] = None,
        scheduler: Optional[Scheduler] = None,
        misfire_delay: Optional[float] = None,
        on_correct: Optional[Callable[[], None]] = None,
        on_incorrect: Optional[Callable[[], None]] = None,
        rng: Optional[random.Random] = None,
    ):
        settings = get_settings()
        self.vocabulary = vocabulary
        self.pair_count = pair_count if pair_count is not None else settings.MATCHING_PAIR_COUNT
        self.misfire_delay = misfire_delay if misfire_delay is not None else settings.MISFIRE_CLEAR_DELAY
        self.on_correct = on_correct
        self.on_incorrect = on_incorrect
        self._rng = rng or random.Random()

        self._misfire_expiry: Optional[DeferredAction] = None
        self._scheduler = scheduler
        self._last_misfire: Optional[str] = None

        self.left_tiles: list[MatchingTile] = []
        self.right_tiles: list[MatchingTile] = []
        self.selected_left: Optional[str] = None
        self.selected_right: Optional[str] = None
        self.matches: dict[str, str] = {}
        self.misfires: set[str] = set()

        if len(vocabulary) > 0:
            self.generate_pairs()

    def generate_pairs(self) -> None:
        """Draw distinct words and lay them out; the right column is shuffled."""
        self._cancel_misfire_expiry()

        selected: list[Word] = []
        used_ids: set[str] = set()
        target = min(self.pair_count, len(self.vocabulary))
        while len(selected) < target:
            word = self.vocabulary.random_word(used_ids)
            if word is None:
                break
            selected.append(word)
            used_ids.add(word.id)

        self.left_tiles = [MatchingTile.from_word(word) for word in selected]
        self.right_tiles = [MatchingTile.from_word(word) for word in shuffle_array(selected, self._rng)]
        self.matches = {}
        self.selected_left = None
        self.selected_right = None
        self.misfires = set()

    def reset(self) -> None:
        self.generate_pairs()

    def close(self) -> None:
        """Drop any pending misfire expiry. Call when the board is discarded."""
        self._cancel_misfire_expiry()

    @property
    def state(self) -> MatchingState:
        if self.selected_left is not None:
            return "left-pending"
        if self.selected_right is not None:
            return "right-pending"
        return "idle"

    @property
    def is_complete(self) -> bool:
        return len(self.left_tiles) > 0 and len(self.matches) == len(self.left_tiles)

    def select_left(self, tile_id: str) -> None:
        if tile_id in self.matches or not any(tile.id == tile_id for tile in self.left_tiles):
            return
        self.selected_left = None if self.selected_left == tile_id else tile_id
        self._resolve()

    def select_right(self, tile_id: str) -> None:
        if tile_id in self.matches.values() or not any(tile.id == tile_id for tile in self.right_tiles):
            return
        self.selected_right = None if self.selected_right == tile_id else tile_id
        self._resolve()

    def clear_misfire(self, key: str) -> None:
        self.misfires.discard(key)

    def _resolve(self) -> None:
        if self.selected_left is None or self.selected_right is None:
            return

        left_id, right_id = self.selected_left, self.selected_right
        if left_id == right_id:
            self.matches[left_id] = right_id
            for tile in self.left_tiles:
                if tile.id == left_id:
                    tile.matched = True
            for tile in self.right_tiles:
                if tile.id == right_id:
                    tile.matched = True
            if self.on_correct:
                self.on_correct()
        else:
            self._record_misfire(misfire_key(left_id, right_id))
            if self.on_incorrect:
                self.on_incorrect()

        self.selected_left = None
        self.selected_right = None

    def _record_misfire(self, key: str) -> None:
        # A newer misfire replaces the previous marker and its expiry
        self._cancel_misfire_expiry()
        self.misfires.add(key)
        self._last_misfire = key
        if self._scheduler is not None:
            self._misfire_expiry = DeferredAction(self._scheduler, lambda: self.clear_misfire(key))
            self._misfire_expiry.schedule(self.misfire_delay)

    def _cancel_misfire_expiry(self) -> None:
        if self._misfire_expiry is not None:
            self._misfire_expiry.cancel()
            self._misfire_expiry = None
        if self._last_misfire is not None:
            self.misfires.discard(self._last_misfire)
        self._last_misfire = None

"""
Game session - the round loop for one game type.

Generates a round, checks submitted answers, records the verdict in the score
ledger and, after a correct answer, schedules the next round through the
caller's scheduler. A wrong answer leaves the round open for another attempt.
"""
import logging
from typing import Optional, Sequence, Union

from hebrew_train.config import get_settings
from hebrew_train.models.round import GameType, Round
from hebrew_train.services.answers import check_answer
from hebrew_train.services.rounds import RoundGenerator
from hebrew_train.services.scheduling import DeferredAction, Scheduler
from hebrew_train.services.score import ScoreLedger

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the current round of one game type until close()."""

    def __init__(
        self,
        game_type: GameType,
        generator: RoundGenerator,
        ledger: ScoreLedger,
        scheduler: Scheduler,
        auto_next_delay: Optional[float] = None,
    ):
        if game_type == "matching":
            raise ValueError("Matching boards are played through MatchingGame")
        self.game_type = game_type
        self.generator = generator
        self.ledger = ledger
        self.ledger.game_type = game_type
        self.auto_next_delay = (
            auto_next_delay if auto_next_delay is not None else get_settings().AUTO_NEXT_DELAY
        )
        self._auto_next = DeferredAction(scheduler, self.next_round)
        self.current: Optional[Round] = None

    @property
    def is_loading(self) -> bool:
        """True while there is no round to show (empty catalog)."""
        return self.current is None

    @property
    def show_feedback(self) -> bool:
        return self.current is not None and self.current.is_correct is not None

    def next_round(self) -> Optional[Round]:
        """Replace the current round with a new one."""
        self._auto_next.cancel()
        self.current = self.generator.generate(self.game_type)
        return self.current

    def go_next(self) -> Optional[Round]:
        """Skip the auto-advance delay."""
        self._auto_next.fire_now()
        return self.current

    def submit(self, answer: Union[str, Sequence[str]]) -> Optional[bool]:
        """
        Check an answer for the current round.

        Returns None when there is nothing to check (no round, blank typed
        answer, or the round is already solved).
        """
        round_ = self.current
        if round_ is None or round_.is_resolved:
            return None
        if isinstance(answer, str):
            answer = answer.strip()
            if not answer:
                return None
            round_.user_answer = answer
        else:
            round_.user_answer = "".join(answer)

        round_.attempts += 1
        correct = check_answer(round_, answer)
        round_.is_correct = correct
        self.ledger.record(correct)

        if correct:
            self._auto_next.schedule(self.auto_next_delay)
        else:
            logger.debug("Wrong answer for %s (attempt %d)", round_.word.id, round_.attempts)
        return correct

    def retry(self) -> None:
        """Clear the last answer so the same round can be tried again."""
        if self.current is not None:
            self.current.user_answer = ""
            self.current.is_correct = None

    def close(self) -> None:
        """Cancel the pending auto-advance. Call when the session is discarded."""
        self._auto_next.cancel()

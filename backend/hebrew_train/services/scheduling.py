"""Deferred callbacks.

The engine never owns a timer. Anything time based (auto-advance, clearing a
misfire marker) is handed to a Scheduler supplied by the embedding layer.
"""

import asyncio
import heapq
import itertools
from typing import Callable, Optional, Protocol


class Cancelable(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Protocol for the caller-provided scheduling capability."""

    def after(self, delay: float, callback: Callable[[], None]) -> Cancelable:
        """Run callback once after `delay` seconds. The handle cancels it."""
        ...


class AsyncioScheduler:
    """Scheduler backed by the running asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def after(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class ManualTimer:
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by an explicit clock. Callbacks fire only inside advance()."""

    def __init__(self):
        self.now = 0.0
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._counter = itertools.count()

    def after(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + delay, callback)
        heapq.heappush(self._queue, (timer.due, next(self._counter), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that have not fired or been cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks in order. Returns how many fired."""
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = due
            timer.callback()
            fired += 1
        self.now = target
        return fired


class DeferredAction:
    """
    A callback with at most one pending run.

    Scheduling again replaces the pending run; cancel() drops it.
    """

    def __init__(self, scheduler: Scheduler, callback: Callable[[], None]):
        self._scheduler = scheduler
        self._callback = callback
        self._handle: Optional[Cancelable] = None

    @property
    def is_pending(self) -> bool:
        return self._handle is not None

    def schedule(self, delay: float) -> None:
        self.cancel()
        self._handle = self._scheduler.after(delay, self._run)

    def fire_now(self) -> None:
        """Run immediately, dropping any pending run."""
        self.cancel()
        self._callback()

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _run(self) -> None:
        self._handle = None
        self._callback()

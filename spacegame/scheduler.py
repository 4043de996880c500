"""
Deterministic timer queue.

Every delayed action in the game (countdown steps, shield expiry, fire
cooldown, and the simulation tick itself) goes through ``Scheduler.schedule``.
Time only moves when the owner calls ``advance`` with elapsed milliseconds,
so tests can drive it exactly and the pygame shell can feed it
``Clock.tick()`` results.
"""

import heapq
import itertools
import logging
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class TimerHandle:
    """Returned by ``schedule``; lets the caller cancel a pending callback."""

    __slots__ = ("due", "callback", "cancelled", "fired")

    def __init__(self, due: int, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        self.cancelled = True


class Scheduler:
    def __init__(self, now: int = 0):
        self.now = now
        self._queue: List[Tuple[int, int, TimerHandle]] = []
        self._seq = itertools.count()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay must not be negative, got {delay_ms}")
        handle = TimerHandle(self.now + int(delay_ms), callback)
        # Sequence number keeps same-instant callbacks in scheduling order.
        heapq.heappush(self._queue, (handle.due, next(self._seq), handle))
        return handle

    def advance(self, elapsed_ms: int) -> int:
        """
        Move time forward, firing every callback due on the way in due order.

        Callbacks may schedule further callbacks; those fire in the same call
        if they fall due before the target time. Returns the number fired.
        """
        if elapsed_ms < 0:
            raise ValueError(f"cannot move time backwards by {elapsed_ms} ms")
        target = self.now + int(elapsed_ms)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = due
            handle.fired = True
            handle.callback()
            fired += 1
        self.now = target
        return fired

    def next_due(self) -> Optional[int]:
        for due, _, handle in sorted(self._queue):
            if not handle.cancelled:
                return due
        return None

    def cancel_all(self):
        for _, _, handle in self._queue:
            handle.cancel()
        if self._queue:
            logger.debug("Cancelled %d pending timers", len(self._queue))
        self._queue.clear()

    def __len__(self):
        return sum(1 for _, _, h in self._queue if not h.cancelled)

"""
Timed effects: flags whose reset is scheduled rather than event-driven.

Each effect runs  running → elapsed → (callback) → idle.  Restarting a
running effect cancels the pending timer first, so the newest start always
wins and durations never stack.
"""

import logging
from typing import Callable, Optional

from spacegame.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class TimedEffect:
    """One-shot timer that calls ``on_elapse`` ``duration_ms`` after the last start."""

    def __init__(self, name: str, scheduler: Scheduler, duration_ms: int,
                 on_elapse: Callable[[], None]):
        self.name = name
        self.duration_ms = duration_ms
        self.on_elapse = on_elapse
        self._scheduler = scheduler
        self._handle: Optional[TimerHandle] = None

    @property
    def running(self) -> bool:
        return self._handle is not None and self._handle.pending

    @property
    def expires_at(self) -> Optional[int]:
        return self._handle.due if self.running else None

    @property
    def remaining_ms(self) -> int:
        if not self.running:
            return 0
        return max(0, self._handle.due - self._scheduler.now)

    def start(self):
        restarted = self.running
        self.cancel()
        self._handle = self._scheduler.schedule(self.duration_ms, self._elapse)
        logger.debug("%s %s, expires at %d ms", self.name,
                     "restarted" if restarted else "started", self._handle.due)

    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _elapse(self):
        self._handle = None
        logger.debug("%s elapsed", self.name)
        self.on_elapse()


class Countdown:
    """
    Pre-game countdown.
    Decrements ``remaining`` once per step and calls ``on_finish`` at zero.
    """

    def __init__(self, scheduler: Scheduler, start: int, step_ms: int,
                 on_finish: Callable[[], None],
                 on_step: Optional[Callable[[int], None]] = None):
        self.start_value = start
        self.remaining = start
        self.step_ms = step_ms
        self.on_finish = on_finish
        self.on_step = on_step
        self._scheduler = scheduler
        self._handle: Optional[TimerHandle] = None

    @property
    def running(self) -> bool:
        return self._handle is not None and self._handle.pending

    @property
    def finished(self) -> bool:
        return self.remaining <= 0

    def start(self):
        if self.running:
            return
        self.remaining = self.start_value
        if self.finished:
            self.on_finish()
            return
        self._handle = self._scheduler.schedule(self.step_ms, self._step)

    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _step(self):
        self._handle = None
        self.remaining -= 1
        if self.on_step:
            self.on_step(self.remaining)
        if self.finished:
            self.on_finish()
        else:
            self._handle = self._scheduler.schedule(self.step_ms, self._step)

"""Fixed-period simulation clock driven by the scheduler."""

import logging
from typing import Callable, Optional

from spacegame.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class SimulationClock:
    """Calls ``on_tick`` every ``period_ms`` while running."""

    def __init__(self, scheduler: Scheduler, period_ms: int, on_tick: Callable[[], None]):
        if period_ms <= 0:
            raise ValueError("tick period must be positive")
        self.period_ms = period_ms
        self.on_tick = on_tick
        self.ticks = 0
        self._scheduler = scheduler
        self._handle: Optional[TimerHandle] = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self):
        if self.running:
            return
        logger.info("Simulation clock started (%d ms period)", self.period_ms)
        self._handle = self._scheduler.schedule(self.period_ms, self._fire)

    def stop(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.info("Simulation clock stopped after %d ticks", self.ticks)

    def _fire(self):
        # Reschedule first so the period stays fixed; the tick may stop us.
        self._handle = self._scheduler.schedule(self.period_ms, self._fire)
        self.ticks += 1
        self.on_tick()

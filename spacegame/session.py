"""
Game session: the one owner of ``GameState``.

PHASES:
    PRE_GAME → COUNTDOWN → ACTIVE → GAME_OVER (terminal)

SYNCHRONISATION:
    Input intents, timer callbacks and simulation ticks all mutate state while
    holding ``Session._lock``. Timers and ticks only ever run inside
    ``advance``, so a timer can never land in the middle of a tick. Input is
    applied immediately rather than queued for the next tick.
"""

import logging
import random
import threading
from typing import Callable, Optional

from spacegame.clock import SimulationClock
from spacegame.config import COUNTDOWN_STEP_MS, GameConfig
from spacegame.controls import Intent, move_player
from spacegame.effects import Countdown, TimedEffect
from spacegame.engine import GameEvent, update
from spacegame.entities import projectile_origin
from spacegame.scheduler import Scheduler
from spacegame.state import GameState, Phase, new_game_state

logger = logging.getLogger(__name__)

EventListener = Callable[[GameEvent], None]


class Session:
    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None,
                 scheduler: Optional[Scheduler] = None,
                 listener: Optional[EventListener] = None):
        self.config    = config or GameConfig()
        self.rng       = rng or random.Random()
        self.scheduler = scheduler or Scheduler()
        self.listener  = listener
        self.state     = new_game_state(self.config)
        self.phase     = Phase.PRE_GAME
        self._lock     = threading.RLock()

        self.countdown = Countdown(
            self.scheduler, self.config.countdown_start, COUNTDOWN_STEP_MS,
            on_finish=self._begin_play,
            on_step=lambda n: logger.debug("Starting in %d", n),
        )
        self.shield = TimedEffect("shield", self.scheduler,
                                  self.config.shield_ms, self._shield_elapsed)
        self.fire_cooldown = TimedEffect("fire cooldown", self.scheduler,
                                         self.config.fire_cooldown_ms, self._cooldown_elapsed)
        self.clock = SimulationClock(self.scheduler, self.config.tick_ms, self._tick)

    # ── Lifecycle ─────────────────────────────────────────────

    def start(self):
        """Begin the pre-game countdown. Only the first call has any effect."""
        with self._lock:
            if self.phase != Phase.PRE_GAME:
                return
            self.phase = Phase.COUNTDOWN
            logger.info("Countdown from %d (spawn probability %.2f)",
                        self.config.countdown_start, self.state.spawn_probability)
            self.countdown.start()

    def advance(self, elapsed_ms: int):
        """Let ``elapsed_ms`` of game time pass; fires timers and ticks in order."""
        with self._lock:
            self.scheduler.advance(elapsed_ms)

    @property
    def countdown_remaining(self) -> int:
        return self.countdown.remaining

    @property
    def is_over(self) -> bool:
        return self.phase == Phase.GAME_OVER

    def snapshot(self) -> GameState:
        """Copy of the current state, safe to hand to a renderer."""
        with self._lock:
            return self.state.copy()

    # ── Input ─────────────────────────────────────────────────

    def handle(self, intent: Intent) -> bool:
        """Apply one intent now. Returns False when it was ignored."""
        with self._lock:
            if self.phase != Phase.ACTIVE:
                return False
            if intent == Intent.MOVE_LEFT:
                move_player(self.state, -1, self.config)
            elif intent == Intent.MOVE_RIGHT:
                move_player(self.state, 1, self.config)
            elif intent == Intent.FIRE:
                return self.fire()
            elif intent == Intent.SHIELD:
                return self.activate_shield()
            return True

    def fire(self) -> bool:
        """Shoot if the cooldown allows. Ignored outside ACTIVE."""
        with self._lock:
            state = self.state
            if self.phase != Phase.ACTIVE or state.is_firing:
                return False
            state.is_firing = True
            if not state.projectile_visible:
                state.projectile = projectile_origin(state.player)
                state.projectile_visible = True
                self._emit(GameEvent.FIRED)
            self.fire_cooldown.start()
            return True

    def activate_shield(self) -> bool:
        """Raise the shield and (re)start its timer. Ignored outside ACTIVE."""
        with self._lock:
            if self.phase != Phase.ACTIVE:
                return False
            self.state.shield_active = True
            self.shield.start()
            return True

    # ── Timer callbacks (run inside advance) ──────────────────

    def _begin_play(self):
        logger.info("Countdown finished, game on")
        self.phase = Phase.ACTIVE
        self.clock.start()

    def _shield_elapsed(self):
        self.state.shield_active = False

    def _cooldown_elapsed(self):
        self.state.is_firing = False

    def _tick(self):
        result = update(self.state, self.rng, self.config)
        self.state = result.state
        for event in result.events:
            self._emit(event)
        if self.state.is_game_over:
            self._finish()

    def _finish(self):
        self.phase = Phase.GAME_OVER
        self.clock.stop()
        self.scheduler.cancel_all()
        logger.info("Session over after %d ticks: score %d",
                    self.clock.ticks, self.state.score)

    def _emit(self, event: GameEvent):
        if self.listener is None:
            return
        try:
            self.listener(event)
        except Exception:
            logger.exception("Event listener failed on %s", event.value)

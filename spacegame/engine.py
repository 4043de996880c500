"""
Per-tick update engine.

``update`` takes the current ``GameState`` and returns the next one together
with the events the tick produced (for audio and logging). The input state is
never mutated. Step order matters:

    1. obstacles fall, leave through the bottom
    2. projectile rises, hits at most one obstacle
    3. power-ups fall, leave through the bottom
    4. spawn roll (obstacle, maybe a power-up on top of it)
    5. power-up pickups (any number)
    6. obstacle vs ship (at most one life per tick, none while shielded)
    7. game over at lives <= 0
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from spacegame.config import SCORE_PER_HIT, GameConfig
from spacegame.entities import (
    Position,
    obstacle_rect, player_rect, power_up_rect, projectile_rect,
)
from spacegame.state import GameState

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    FIRED              = "fired"
    PROJECTILE_HIT     = "projectile_hit"
    PLAYER_HIT         = "player_hit"
    POWER_UP_COLLECTED = "power_up_collected"
    GAME_OVER          = "game_over"


# Events that make the collision sound.
COLLISION_EVENTS = frozenset({GameEvent.PROJECTILE_HIT, GameEvent.PLAYER_HIT})


@dataclass
class TickResult:
    state:  GameState
    events: List[GameEvent] = field(default_factory=list)


# ─────────────────────────────────────────────────────────────
# STEPS
# ─────────────────────────────────────────────────────────────

def _fall(items: List[Position], speed: int, height: int) -> List[Position]:
    moved = [p.moved(dy=speed) for p in items]
    return [p for p in moved if p.y <= height]


def _move_projectile(state: GameState, config: GameConfig, events: List[GameEvent]):
    if not state.projectile_visible:
        return
    state.projectile = state.projectile.moved(dy=-config.projectile_speed)
    if state.projectile.y < 0:
        state.projectile_visible = False
        return

    shot = projectile_rect(state.projectile)
    for i, obs in enumerate(state.obstacles):
        if shot.colliderect(obstacle_rect(obs)):
            del state.obstacles[i]
            state.projectile_visible = False
            state.score += SCORE_PER_HIT
            events.append(GameEvent.PROJECTILE_HIT)
            return


def _spawn(state: GameState, rng: random.Random, config: GameConfig):
    if rng.random() >= state.spawn_probability:
        return
    pos = Position(rng.randint(0, config.max_spawn_x), 0)
    state.obstacles.append(pos)
    if rng.random() < config.power_up_chance:
        state.power_ups.append(pos)


def _collect_power_ups(state: GameState, events: List[GameEvent]):
    ship = player_rect(state.player)
    kept = []
    for p in state.power_ups:
        if ship.colliderect(power_up_rect(p)):
            state.lives += 1
            events.append(GameEvent.POWER_UP_COLLECTED)
        else:
            kept.append(p)
    state.power_ups = kept


def _ram_obstacles(state: GameState, events: List[GameEvent]):
    if state.shield_active:
        return
    ship = player_rect(state.player)
    for i, obs in enumerate(state.obstacles):
        if ship.colliderect(obstacle_rect(obs)):
            del state.obstacles[i]
            state.lives -= 1
            events.append(GameEvent.PLAYER_HIT)
            return


# ─────────────────────────────────────────────────────────────
# ENTRY POINT
# ─────────────────────────────────────────────────────────────

def update(state: GameState, rng: random.Random, config: GameConfig) -> TickResult:
    """Advance ``state`` by one tick and return the new state and its events."""
    if state.is_game_over:
        return TickResult(state)

    nxt = state.copy()
    events: List[GameEvent] = []

    nxt.obstacles = _fall(nxt.obstacles, config.obstacle_speed, config.height)
    _move_projectile(nxt, config, events)
    nxt.power_ups = _fall(nxt.power_ups, config.obstacle_speed, config.height)
    _spawn(nxt, rng, config)
    _collect_power_ups(nxt, events)
    _ram_obstacles(nxt, events)

    if nxt.lives <= 0:
        nxt.is_game_over = True
        events.append(GameEvent.GAME_OVER)
        logger.info("Game over with score %d", nxt.score)

    return TickResult(nxt, events)

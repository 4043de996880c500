"""Mutable game state and the session phase machine."""

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import List

from spacegame.config import HEIGHT, PLAYER_HEIGHT, PLAYER_WIDTH, START_LIVES, WIDTH, GameConfig
from spacegame.entities import Position


class Phase(Enum):
    PRE_GAME  = auto()
    COUNTDOWN = auto()
    ACTIVE    = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """
    Everything one tick reads and writes.

    Obstacles and power-ups are ordered lists of top-left positions; list
    order decides which obstacle a projectile (or the ship) hits first.
    """
    player:             Position
    projectile:         Position
    spawn_probability:  float
    score:              int  = 0
    lives:              int  = START_LIVES
    projectile_visible: bool = False
    shield_active:      bool = False
    is_firing:          bool = False
    is_game_over:       bool = False
    obstacles:  List[Position] = field(default_factory=list)
    power_ups:  List[Position] = field(default_factory=list)

    def copy(self) -> "GameState":
        # Positions are immutable, so fresh lists are enough.
        return replace(self, obstacles=list(self.obstacles), power_ups=list(self.power_ups))


def start_position(width=WIDTH, height=HEIGHT) -> Position:
    """Centred horizontally, just above the bottom edge."""
    return Position(width // 2 - PLAYER_WIDTH // 2, height - PLAYER_HEIGHT - 20)


def new_game_state(config: GameConfig) -> GameState:
    player = start_position(config.width, config.height)
    return GameState(
        player=player,
        projectile=player,
        spawn_probability=config.spawn_probability,
        lives=config.start_lives,
    )

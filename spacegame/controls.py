"""
Keyboard input → player intents.

Movement is discrete: each key-down event moves the ship one step. Holding a
key keeps producing key-down events through pygame's key repeat, which the
shell enables at startup.
"""

from enum import Enum, auto
from typing import Dict, Optional

import pygame

from spacegame.config import GameConfig
from spacegame.entities import Position
from spacegame.state import GameState


class Intent(Enum):
    MOVE_LEFT  = auto()
    MOVE_RIGHT = auto()
    FIRE       = auto()
    SHIELD     = auto()


KEY_BINDINGS: Dict[int, Intent] = {
    pygame.K_LEFT:  Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_SPACE: Intent.FIRE,
    pygame.K_s:     Intent.SHIELD,
}

# Initial delay / interval (ms) for held keys, close to a desktop's auto-repeat.
KEY_REPEAT = (200, 30)


def intent_for(event) -> Optional[Intent]:
    if event.type != pygame.KEYDOWN:
        return None
    return KEY_BINDINGS.get(event.key)


def move_player(state: GameState, direction: int, config: GameConfig):
    """Shift the ship one step left (-1) or right (+1), clamped to the playfield."""
    x = state.player.x + direction * config.player_speed
    x = max(0, min(config.max_player_x, x))
    state.player = Position(x, state.player.y)


class InputHandler:
    """Routes pygame events to a session as intents, applied immediately."""

    def __init__(self, session):
        self.session = session

    def handle_event(self, event) -> Optional[Intent]:
        intent = intent_for(event)
        if intent is not None:
            self.session.handle(intent)
        return intent

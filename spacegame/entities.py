"""Entity positions and their bounding boxes."""

from typing import NamedTuple

import pygame

from spacegame.config import (
    OBSTACLE_HEIGHT, OBSTACLE_WIDTH,
    PLAYER_HEIGHT, PLAYER_WIDTH,
    POWER_UP_SIZE,
    PROJECTILE_HEIGHT, PROJECTILE_WIDTH,
)


class Position(NamedTuple):
    x: int
    y: int

    def moved(self, dx=0, dy=0) -> "Position":
        return Position(self.x + dx, self.y + dy)


def player_rect(pos: Position) -> pygame.Rect:
    return pygame.Rect(pos.x, pos.y, PLAYER_WIDTH, PLAYER_HEIGHT)


def obstacle_rect(pos: Position) -> pygame.Rect:
    return pygame.Rect(pos.x, pos.y, OBSTACLE_WIDTH, OBSTACLE_HEIGHT)


def power_up_rect(pos: Position) -> pygame.Rect:
    return pygame.Rect(pos.x, pos.y, POWER_UP_SIZE, POWER_UP_SIZE)


def projectile_rect(pos: Position) -> pygame.Rect:
    return pygame.Rect(pos.x, pos.y, PROJECTILE_WIDTH, PROJECTILE_HEIGHT)


def projectile_origin(player: Position) -> Position:
    """Spawn point for a shot: horizontally centred on the ship, at its top edge."""
    return Position(player.x + (PLAYER_WIDTH - PROJECTILE_WIDTH) // 2, player.y)

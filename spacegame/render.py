"""
Renderer: draws one frame from a state snapshot.

Reads only; never touches the session. Sprites come from the assets
directory and fall back to plain shapes when an image can't be loaded.
"""

import logging
import random
from pathlib import Path
from typing import Dict, Optional

import pygame

from spacegame.config import (
    ASSETS_DIR, HEIGHT, OBSTACLE_HEIGHT, OBSTACLE_WIDTH,
    PLAYER_HEIGHT, PLAYER_WIDTH, POWER_UP_SIZE,
    PROJECTILE_HEIGHT, PROJECTILE_WIDTH, STAR_COUNT, WIDTH,
    Difficulty,
)
from spacegame.state import GameState, Phase

logger = logging.getLogger(__name__)

# Colour palette
C_BG         = (0,   0,   0)
C_PROJECTILE = (0,   255, 0)
C_POWER_UP   = (255, 255, 0)
C_SCORE      = (0,   0,   255)
C_LIVES      = (255, 0,   0)
C_WHITE      = (255, 255, 255)
C_SHIP       = (80,  220, 255)
C_SHIELD     = (60,  160, 255)
C_OBSTACLE   = (150, 150, 150)
C_DIM        = (120, 120, 160)


def draw_text_centered(surface, text, font, color, cx, cy):
    img = font.render(text, True, color)
    rect = img.get_rect(center=(cx, cy))
    surface.blit(img, rect)
    return rect


class Renderer:
    IMAGES = {
        "ship":     ("spaceship.png", (PLAYER_WIDTH, PLAYER_HEIGHT)),
        "shield":   ("shield.png",    (PLAYER_WIDTH, PLAYER_HEIGHT)),
        "obstacle": ("obstacles.png", (OBSTACLE_WIDTH, OBSTACLE_HEIGHT)),
    }

    def __init__(self, assets_dir: Optional[Path] = None, rng: Optional[random.Random] = None):
        pygame.font.init()
        self.font_hud   = pygame.font.Font(None, 20)
        self.font_large = pygame.font.Font(None, 32)
        # Separate generator so the star field never shifts the simulation's draws.
        self.rng = rng or random.Random()
        self.images: Dict[str, pygame.Surface] = {}
        assets = Path(assets_dir or ASSETS_DIR)
        for key, (filename, size) in self.IMAGES.items():
            image = self._load(assets / filename)
            if image is not None:
                self.images[key] = pygame.transform.scale(image, size)

    @staticmethod
    def _load(path: Path) -> Optional[pygame.Surface]:
        if not path.exists():
            logger.warning("Image not found at %s, using shapes", path)
            return None
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError) as e:
            logger.warning("Could not load image %s: %s", path, e)
            return None

    # ── Layers ────────────────────────────────────────────────

    def draw_stars(self, surface):
        """Fresh random stars each frame, as the original twinkling backdrop."""
        for _ in range(STAR_COUNT):
            x = self.rng.randrange(WIDTH)
            y = self.rng.randrange(HEIGHT)
            color = tuple(self.rng.randrange(256) for _ in range(3))
            pygame.draw.ellipse(surface, color, (x, y, 2, 2))

    def draw_player(self, surface, state: GameState):
        key = "shield" if state.shield_active else "ship"
        rect = pygame.Rect(state.player.x, state.player.y, PLAYER_WIDTH, PLAYER_HEIGHT)
        image = self.images.get(key)
        if image is not None:
            surface.blit(image, rect)
            return
        cx = rect.centerx
        hull = [(cx, rect.top), (rect.left, rect.bottom), (cx, rect.bottom - 12), (rect.right, rect.bottom)]
        pygame.draw.polygon(surface, C_SHIP, hull)
        if state.shield_active:
            pygame.draw.circle(surface, C_SHIELD, rect.center, PLAYER_WIDTH // 2 + 4, 2)

    def draw_entities(self, surface, state: GameState):
        if state.projectile_visible:
            pygame.draw.rect(surface, C_PROJECTILE,
                             (state.projectile.x, state.projectile.y,
                              PROJECTILE_WIDTH, PROJECTILE_HEIGHT))

        obstacle = self.images.get("obstacle")
        for obs in state.obstacles:
            if obstacle is not None:
                surface.blit(obstacle, (obs.x, obs.y))
            else:
                pygame.draw.rect(surface, C_OBSTACLE, (obs.x, obs.y, OBSTACLE_WIDTH, OBSTACLE_HEIGHT))

        for p in state.power_ups:
            pygame.draw.ellipse(surface, C_POWER_UP, (p.x, p.y, POWER_UP_SIZE, POWER_UP_SIZE))

    def draw_hud(self, surface, state: GameState):
        surface.blit(self.font_hud.render(f"Score: {state.score}", True, C_SCORE), (10, 10))
        surface.blit(self.font_hud.render(f"Lives: {state.lives}", True, C_LIVES), (10, 30))

    def draw_menu(self, surface, selected: Difficulty):
        draw_text_centered(surface, "Choose the difficulty level:",
                           self.font_large, C_WHITE, WIDTH // 2, HEIGHT // 2 - 60)
        for i, difficulty in enumerate(Difficulty):
            marker = ">" if difficulty == selected else " "
            color = C_WHITE if difficulty == selected else C_DIM
            draw_text_centered(surface, f"{marker} {i + 1}. {difficulty.label}",
                               self.font_large, color, WIDTH // 2, HEIGHT // 2 + i * 34)
        draw_text_centered(surface, "ENTER to start", self.font_hud, C_DIM,
                           WIDTH // 2, HEIGHT // 2 + 100)

    # ── Frame ─────────────────────────────────────────────────

    def draw(self, surface, state: GameState, phase: Phase, countdown: int = 0):
        surface.fill(C_BG)
        self.draw_stars(surface)
        self.draw_player(surface, state)
        self.draw_entities(surface, state)
        self.draw_hud(surface, state)

        if phase == Phase.COUNTDOWN:
            draw_text_centered(surface, f"Starting in: {countdown}",
                               self.font_large, C_WHITE, WIDTH // 2, HEIGHT // 2 - 25)
        if state.is_game_over:
            draw_text_centered(surface, "Game Over!", self.font_large,
                               C_WHITE, WIDTH // 2, HEIGHT // 2)

"""
Constants and configuration for the simulation core.

Values mirror the classic 500x500 arcade layout. ``GameConfig`` bundles the
tunables the engine reads each tick; the difficulty menu only picks which
spawn probability goes into it.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# ─────────────────────────────────────────────────────────────
# PLAYFIELD & ENTITY SIZES
# ─────────────────────────────────────────────────────────────

WIDTH, HEIGHT = 500, 500

PLAYER_WIDTH, PLAYER_HEIGHT = 50, 50
OBSTACLE_WIDTH, OBSTACLE_HEIGHT = 20, 20
PROJECTILE_WIDTH, PROJECTILE_HEIGHT = 5, 10
POWER_UP_SIZE = 10

# ─────────────────────────────────────────────────────────────
# SPEEDS (pixels per tick / per key event)
# ─────────────────────────────────────────────────────────────

PLAYER_SPEED     = 5
OBSTACLE_SPEED   = 3
PROJECTILE_SPEED = 10

# ─────────────────────────────────────────────────────────────
# RULES & TIMERS
# ─────────────────────────────────────────────────────────────

START_LIVES        = 3
SCORE_PER_HIT      = 10
POWER_UP_CHANCE    = 0.3    # nested roll once an obstacle spawns

TICK_MS            = 20     # simulation clock period
COUNTDOWN_START    = 5      # seconds shown before play begins
COUNTDOWN_STEP_MS  = 1000
SHIELD_MS          = 5000
FIRE_COOLDOWN_MS   = 500

# Display
FPS = 60
STAR_COUNT = 50
ASSETS_DIR = Path(__file__).parent / "assets"


class Difficulty(Enum):
    """One-time choice made before the countdown; value is the spawn probability."""
    NORMAL    = 0.02
    CHALLENGE = 0.05

    @property
    def label(self):
        return self.name.capitalize()


@dataclass(frozen=True)
class GameConfig:
    width:              int   = WIDTH
    height:             int   = HEIGHT
    player_speed:       int   = PLAYER_SPEED
    obstacle_speed:     int   = OBSTACLE_SPEED
    projectile_speed:   int   = PROJECTILE_SPEED
    spawn_probability:  float = Difficulty.NORMAL.value
    power_up_chance:    float = POWER_UP_CHANCE
    start_lives:        int   = START_LIVES
    tick_ms:            int   = TICK_MS
    countdown_start:    int   = COUNTDOWN_START
    shield_ms:          int   = SHIELD_MS
    fire_cooldown_ms:   int   = FIRE_COOLDOWN_MS

    def __post_init__(self):
        if self.width < PLAYER_WIDTH or self.height < PLAYER_HEIGHT:
            raise ValueError(f"playfield {self.width}x{self.height} cannot hold the player")
        for name in ("player_speed", "obstacle_speed", "projectile_speed", "tick_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("spawn_probability", "power_up_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty, **overrides) -> "GameConfig":
        return cls(spawn_probability=difficulty.value, **overrides)

    @property
    def max_player_x(self) -> int:
        return self.width - PLAYER_WIDTH

    @property
    def max_spawn_x(self) -> int:
        return self.width - OBSTACLE_WIDTH

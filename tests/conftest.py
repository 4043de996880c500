import os
import random

# Headless SDL for any test that touches fonts, surfaces or the mixer.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from spacegame.config import GameConfig
from spacegame.entities import Position
from spacegame.state import new_game_state


class NoSpawnRandom(random.Random):
    """Never passes a spawn roll, so tests control every entity on the field."""

    def random(self):
        return 0.999

    def getrandbits(self, k):
        # Keeps randint/randrange on the bit generator instead of random().
        return super().getrandbits(k)


class ScriptedRandom(random.Random):
    """random() replays a fixed list of values; positions still come from the seed."""

    def __init__(self, values, seed=0):
        super().__init__(seed)
        self.values = list(values)

    def random(self):
        return self.values.pop(0)

    def getrandbits(self, k):
        return super().getrandbits(k)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return NoSpawnRandom(1)


@pytest.fixture
def state(config):
    return new_game_state(config)


def overlapping_obstacle(player: Position) -> Position:
    return Position(player.x + 10, player.y + 10)

"""
Sound effects.

Wraps pygame.mixer with fixed asset names. A missing mixer, a missing file
or a failed playback is logged and otherwise ignored; the simulation never
sees an audio error.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

from spacegame.config import ASSETS_DIR
from spacegame.engine import COLLISION_EVENTS, GameEvent

logger = logging.getLogger(__name__)


class SoundManager:
    SOUNDS = {
        "fire":      "fire.wav",
        "collision": "collision.wav",
    }

    def __init__(self, assets_dir: Optional[Path] = None, enabled: bool = True):
        self.assets_dir = Path(assets_dir or ASSETS_DIR)
        self.enabled = enabled
        self._cache: Dict[str, "pygame.mixer.Sound"] = {}
        if not enabled:
            return
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning("Audio disabled, mixer unavailable: %s", e)
                self.enabled = False
                return
        for name, filename in self.SOUNDS.items():
            path = self.assets_dir / filename
            if not path.exists():
                logger.warning("Sound %r not found at %s", name, path)
                continue
            try:
                self._cache[name] = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError) as e:
                logger.warning("Could not load sound %s: %s", path, e)

    def play(self, name: str, volume: float = 0.7):
        snd = self._cache.get(name)
        if snd is None:
            return
        try:
            snd.set_volume(volume)
            snd.play()
        except pygame.error as e:
            logger.warning("Playback of %r failed: %s", name, e)

    def on_event(self, event: GameEvent):
        """Session listener: fire sound for shots, collision sound for hits."""
        if event == GameEvent.FIRED:
            self.play("fire", 0.5)
        elif event in COLLISION_EVENTS:
            self.play("collision")

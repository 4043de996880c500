"""
Pygame shell around the simulation core.

    Game — window, difficulty menu, event routing and the frame loop.

The frame loop feeds real elapsed milliseconds into the session; the
session's scheduler turns them into 20 ms simulation ticks and timer
expiries. Everything runs on the main thread.
"""

import logging
import random
import sys
from typing import Optional

import pygame

from spacegame.audio import SoundManager
from spacegame.config import FPS, HEIGHT, WIDTH, Difficulty, GameConfig
from spacegame.controls import KEY_REPEAT, InputHandler
from spacegame.render import Renderer
from spacegame.session import Session

logger = logging.getLogger(__name__)

MAX_FRAME_MS = 100   # longest slice of time fed to the session per frame

MENU_KEYS = {
    pygame.K_1: Difficulty.NORMAL,
    pygame.K_2: Difficulty.CHALLENGE,
}


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


class Game:
    """
    Master controller.
    Shows the difficulty menu, then owns one session until the window closes.
    """

    def __init__(self, seed: Optional[int] = None):
        pygame.init()
        pygame.display.set_caption("Space Game")
        self.window = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock  = pygame.time.Clock()

        self.sound    = SoundManager()
        self.renderer = Renderer()
        self.seed     = seed

        self.selected = Difficulty.NORMAL
        self.session: Optional[Session] = None
        self.input: Optional[InputHandler] = None

    def _start_session(self, difficulty: Difficulty):
        logger.info("Difficulty: %s", difficulty.label)
        config = GameConfig.for_difficulty(difficulty)
        self.session = Session(config, rng=random.Random(self.seed),
                               listener=self.sound.on_event)
        self.input = InputHandler(self.session)
        pygame.key.set_repeat(*KEY_REPEAT)
        self.session.start()

    # ── Main loop ─────────────────────────────────────────────

    def run(self):
        while True:
            elapsed = min(self.clock.tick(FPS), MAX_FRAME_MS)
            self._handle_events()
            if self.session is not None:
                self.session.advance(elapsed)
            self._draw()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                self._quit()
            if self.session is None:
                self._handle_menu_key(event.key)
            else:
                self.input.handle_event(event)

    def _handle_menu_key(self, key):
        if key in MENU_KEYS:
            self.selected = MENU_KEYS[key]
        elif key in (pygame.K_UP, pygame.K_DOWN):
            options = list(Difficulty)
            step = 1 if key == pygame.K_DOWN else -1
            self.selected = options[(options.index(self.selected) + step) % len(options)]
        elif key == pygame.K_RETURN:
            self._start_session(self.selected)

    def _draw(self):
        if self.session is None:
            self.window.fill((0, 0, 0))
            self.renderer.draw_stars(self.window)
            self.renderer.draw_menu(self.window, self.selected)
        else:
            self.renderer.draw(self.window, self.session.snapshot(),
                               self.session.phase, self.session.countdown_remaining)
        pygame.display.flip()

    @staticmethod
    def _quit():
        pygame.quit()
        sys.exit()


def main():
    setup_logging()
    Game().run()


if __name__ == "__main__":
    main()

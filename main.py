"""
╔══════════════════════════════════════════════════════════════╗
║           SPACE GAME — Arcade Dodge & Shoot                  ║
║           Built with Python + Pygame                         ║
╚══════════════════════════════════════════════════════════════╝

ARCHITECTURE OVERVIEW:
    spacegame.app        — Window, difficulty menu, frame loop
    spacegame.session    — Phase machine, lock, timers, tick dispatch
    spacegame.engine     — Per-tick movement, spawning, collisions, scoring
    spacegame.effects    — Countdown, shield and fire-cooldown timers
    spacegame.scheduler  — Deterministic schedule(delay, callback) queue
    spacegame.clock      — Fixed 20 ms simulation clock
    spacegame.controls   — Key events → intents, ship movement
    spacegame.render     — Stars, sprites, HUD and overlays
    spacegame.audio      — Fire / collision sounds (graceful if no files)

STATE MACHINE:
    PRE_GAME → COUNTDOWN → ACTIVE → GAME_OVER

CONTROLS:
    ←/→ move   SPACE fire   S shield   ESC quit
    Menu: 1 Normal / 2 Challenge, ENTER start

DEPENDENCIES:
    pip install pygame
    python main.py
"""

from spacegame.app import main

if __name__ == "__main__":
    main()

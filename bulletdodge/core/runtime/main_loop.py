"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and the game controller
- Maintain fixed timestep update loop
- Route keyboard input to the game flow and the player
- Draw plain debug shapes for the player and bullets
"""

import os
import math

import pygame

from bulletdodge.core.debug.debug_logger import DebugLogger
from bulletdodge.core.runtime.game_settings import Debug, Display, Physics
from bulletdodge.core.services.input_manager import InputManager
from bulletdodge.entities.player.player_input import NO_INPUT
from bulletdodge.scenes.game.game_controller import GameState, build_game


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    Implements a fixed timestep for logic with variable rendering.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, seed=None, headless=False):
        """
        Args:
            seed: Spawner seed override (None keeps the configured one).
            headless (bool): Use SDL's dummy video driver, no visible window.
        """
        DebugLogger.section("Initializing MainLoop")

        self.headless = headless
        self._init_pygame()

        self.input_manager = InputManager()
        self.game = build_game(seed=seed, screen_size=(Display.WIDTH, Display.HEIGHT))

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        if self.headless:
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

        pygame.init()
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT}")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """
        Execute main game loop until quit.

        Uses fixed timestep for updates with accumulator pattern.
        Rendering happens once per frame after all updates.
        """
        DebugLogger.section("Game Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            frame_time = self.clock.tick(Display.FPS) / 1000.0
            frame_time = min(frame_time, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            self._handle_events()

            while accumulator >= fixed_dt:
                self.step(fixed_dt)
                accumulator -= fixed_dt

            self._draw()

        self.game.shutdown()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def run_headless(self, frames: int):
        """
        Run a fixed number of steps without waiting on the clock.

        A game is started immediately and the player gets no input, so the
        run ends in GAME_OVER as soon as a bullet reaches the ship.

        Returns:
            dict: Final game snapshot.
        """
        self.game.new_game()
        for _ in range(frames):
            pygame.event.pump()
            self.game.update(Physics.FIXED_DT, NO_INPUT)
            if self.game.state is GameState.GAME_OVER:
                break

        snapshot = self.game.snapshot()
        self.game.shutdown()
        pygame.quit()
        DebugLogger.system(
            f"Headless run finished: state={snapshot['state']} "
            f"time={snapshot['time']:.2f}s score={snapshot['score']}"
        )
        return snapshot

    def step(self, dt: float):
        """One fixed logic step: input, game flow, simulation."""
        self.input_manager.update()

        if self.input_manager.action_pressed("quit"):
            self.running = False
            DebugLogger.action("Quit requested")
            return

        if self.input_manager.action_pressed("toggle_hitboxes"):
            Debug.HITBOX_VISIBLE = not Debug.HITBOX_VISIBLE

        if self.input_manager.action_pressed("start") and self.game.state is not GameState.PLAYING:
            self.game.new_game()

        self.game.update(dt, self.input_manager.flags)

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        """Debug rendering: a triangle for the ship, circles for bullets."""
        self.screen.fill(Display.BACKGROUND)

        player = self.game.player
        if player.visible:
            nose = player.position + pygame.Vector2(18, 0).rotate_rad(player.heading)
            left = player.position + pygame.Vector2(12, 0).rotate_rad(player.heading + 2.5)
            right = player.position + pygame.Vector2(12, 0).rotate_rad(player.heading - 2.5)
            pygame.draw.polygon(self.screen, (120, 220, 255), [nose, left, right])

        for bullet in self.game.bullet_manager.active:
            radius = max(2, int(math.ceil(min(bullet.size) / 2)))
            pygame.draw.circle(self.screen, (255, 110, 90), bullet.position, radius)

        self.game.collision_manager.draw_debug(self.screen)
        pygame.display.flip()

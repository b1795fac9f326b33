"""
input_manager.py
----------------
Keyboard polling for the host loop.

Provides:
- Action bindings for gameplay and system keys
- Per-frame InputFlags snapshot for the player
- Edge detection (pressed) for one-shot system actions
"""

import pygame

from bulletdodge.core.debug.debug_logger import DebugLogger
from bulletdodge.entities.player.player_input import InputFlags


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "forward": [pygame.K_UP, pygame.K_w],
        "backward": [pygame.K_DOWN, pygame.K_s],
        "turn_left": [pygame.K_LEFT, pygame.K_a],
        "turn_right": [pygame.K_RIGHT, pygame.K_d],
    },
    "system": {
        "start": [pygame.K_RETURN, pygame.K_SPACE],
        "quit": [pygame.K_ESCAPE],
        "toggle_hitboxes": [pygame.K_F3],
    },
}


class InputManager:
    """
    Translates raw key state into gameplay flags and system actions.

    Usage:
        input_manager.update()                 # once per fixed step
        flags = input_manager.flags            # InputFlags for the player
        if input_manager.action_pressed("start"):
            game.new_game()
    """

    def __init__(self, key_bindings=None):
        """
        Initialize input system.

        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.flags = InputFlags()
        self._held = {}
        self._pressed = set()

        self._validate_bindings()
        DebugLogger.init_entry("InputManager")

    def _validate_bindings(self):
        """Warn if system keys overlap with gameplay keys."""
        system_keys = set()
        for keys in self.key_bindings["system"].values():
            system_keys.update(keys)

        gameplay_keys = set()
        for keys in self.key_bindings["gameplay"].values():
            gameplay_keys.update(keys)

        overlap = system_keys & gameplay_keys
        if overlap:
            DebugLogger.warn(f"Overlapping system keys: {overlap}", category="input")

    # ===========================================================
    # Polling
    # ===========================================================

    def update(self, pressed=None):
        """
        Sample key state and refresh flags and action edges.

        Args:
            pressed: Indexable key state (defaults to pygame.key.get_pressed()).
        """
        if pressed is None:
            pressed = pygame.key.get_pressed()

        self.flags = self.flags_from_keys(pressed)

        self._pressed.clear()
        for action, keys in self.key_bindings["system"].items():
            held = any(pressed[k] for k in keys)
            if held and not self._held.get(action, False):
                self._pressed.add(action)
                DebugLogger.trace(f"Action pressed: {action}", category="input")
            self._held[action] = held

    def flags_from_keys(self, pressed) -> InputFlags:
        """Build an InputFlags snapshot from an indexable key state."""
        gameplay = self.key_bindings["gameplay"]
        return InputFlags(
            forward=any(pressed[k] for k in gameplay["forward"]),
            backward=any(pressed[k] for k in gameplay["backward"]),
            turn_left=any(pressed[k] for k in gameplay["turn_left"]),
            turn_right=any(pressed[k] for k in gameplay["turn_right"]),
        )

    # ===========================================================
    # Public API: Action Queries
    # ===========================================================

    def action_pressed(self, action: str) -> bool:
        """Check if a system action was just pressed this step (rising edge)."""
        return action in self._pressed

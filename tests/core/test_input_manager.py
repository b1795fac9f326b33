"""
test_input_manager.py
---------------------
Tests for key-state to InputFlags translation and system action edges.
"""

from collections import defaultdict

import pygame
import pytest

from bulletdodge.core.services.input_manager import InputManager
from bulletdodge.entities.player.player_input import InputFlags


def keys(*held):
    """Fake pygame key state with only the given keys held."""
    return defaultdict(bool, {k: True for k in held})


@pytest.fixture
def input_manager():
    return InputManager()


class TestGameplayFlags:

    def test_no_keys_is_idle(self, input_manager):
        input_manager.update(keys())

        assert input_manager.flags == InputFlags()
        assert input_manager.flags.idle

    @pytest.mark.parametrize("key, expected", [
        (pygame.K_UP, InputFlags(forward=True)),
        (pygame.K_w, InputFlags(forward=True)),
        (pygame.K_s, InputFlags(backward=True)),
        (pygame.K_LEFT, InputFlags(turn_left=True)),
        (pygame.K_d, InputFlags(turn_right=True)),
    ])
    def test_single_key_bindings(self, input_manager, key, expected):
        input_manager.update(keys(key))
        assert input_manager.flags == expected

    def test_combined_keys(self, input_manager):
        flags = input_manager.flags_from_keys(keys(pygame.K_w, pygame.K_a))

        assert flags.radial == 1
        assert flags.angular == -1


class TestSystemActions:

    def test_start_fires_on_rising_edge_only(self, input_manager):
        input_manager.update(keys(pygame.K_RETURN))
        assert input_manager.action_pressed("start")

        input_manager.update(keys(pygame.K_RETURN))
        assert not input_manager.action_pressed("start")

        input_manager.update(keys())
        input_manager.update(keys(pygame.K_SPACE))
        assert input_manager.action_pressed("start")

    def test_quit_and_toggle(self, input_manager):
        input_manager.update(keys(pygame.K_ESCAPE, pygame.K_F3))

        assert input_manager.action_pressed("quit")
        assert input_manager.action_pressed("toggle_hitboxes")
        assert not input_manager.action_pressed("start")

    def test_custom_bindings(self):
        bindings = {
            "gameplay": {
                "forward": [pygame.K_i],
                "backward": [pygame.K_k],
                "turn_left": [pygame.K_j],
                "turn_right": [pygame.K_l],
            },
            "system": {"start": [pygame.K_p]},
        }
        manager = InputManager(bindings)

        manager.update(keys(pygame.K_i, pygame.K_p))

        assert manager.flags == InputFlags(forward=True)
        assert manager.action_pressed("start")

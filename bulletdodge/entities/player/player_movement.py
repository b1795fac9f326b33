"""
player_movement.py
------------------
Handles player rotation, thrust, and screen-boundary logic.

Responsibilities
----------------
- Turn the ship from angular input.
- Translate radial input along the new heading.
- Clamp player position to the visible screen area.

There is no acceleration or friction: velocity is rebuilt from the
current input every frame, so releasing a key stops the ship at once.
"""

import pygame

from bulletdodge.core.utils.math_utils import clamp_point


def update_movement(player, dt, flags):
    """
    Integrate one frame of player motion.

    Args:
        player (PlayerController): The player instance being updated.
        dt (float): Delta time since the last frame (in seconds).
        flags (InputFlags): Directional input sampled this frame.
    """
    radial = flags.radial
    angular = flags.angular

    # -------------------------------------------------------
    # Turn first, then thrust along the new heading
    # -------------------------------------------------------
    new_orientation = player.orientation + angular * player.turn_speed * dt

    player.velocity = pygame.Vector2(radial * player.move_speed, 0).rotate_rad(new_orientation)
    displacement = pygame.Vector2(radial * player.move_speed * dt, 0).rotate_rad(new_orientation)

    # -------------------------------------------------------
    # Update position and constrain within screen bounds
    # -------------------------------------------------------
    player.position = clamp_to_screen(player.position + displacement, player.screen_size)
    player.orientation = new_orientation


def clamp_to_screen(position, screen_size) -> pygame.Vector2:
    """Clamp a position componentwise into (0, 0)..screen_size."""
    return clamp_point(position, (0.0, 0.0), screen_size)

"""
player_core.py
--------------
Defines the player ship controller.

The controller owns position and orientation, integrates motion from an
explicit InputFlags snapshot, and turns the first collision of a life into
a single hit notification.
"""

from typing import Callable, Optional

import pygame

from bulletdodge.core.debug.debug_logger import DebugLogger
from bulletdodge.core.runtime.game_settings import Display, Player
from bulletdodge.core.utils.math_utils import wrap_angle
from bulletdodge.entities.entity_state import LifecycleState
from bulletdodge.entities.entity_types import CollisionTags
from bulletdodge.systems.collision.aabb import AABB
from .player_input import InputFlags
from .player_movement import update_movement


class PlayerController:
    """Represents the controllable player ship."""

    def __init__(self, screen_size=(Display.WIDTH, Display.HEIGHT),
                 move_speed: float = Player.MOVE_SPEED,
                 turn_speed: float = Player.TURN_SPEED,
                 hitbox_size=Player.HITBOX_SIZE,
                 on_hit: Optional[Callable[[], None]] = None):
        """
        Initialize the player entity.

        Args:
            screen_size: (width, height) of the clamp rectangle.
            move_speed: Thrust speed in px/s.
            turn_speed: Turn rate in rad/s.
            hitbox_size: (width, height) of the collision box.
            on_hit: Called once when a life ends.
        """
        self.init(screen_size)

        self.move_speed = move_speed
        self.turn_speed = turn_speed
        self.hitbox_size = tuple(hitbox_size)
        self.on_hit = on_hit

        self.position = pygame.Vector2(0, 0)
        self.velocity = pygame.Vector2(0, 0)
        self.orientation = 0.0

        # Hidden and intangible until start()
        self.death_state = LifecycleState.DEAD
        self.visible = False
        self.collision_enabled = False

        self.collision_tag = CollisionTags.PLAYER

        DebugLogger.init_entry("PlayerController Initialized")
        DebugLogger.init_sub(f"Speed: {move_speed:.0f} px/s, Turn: {turn_speed:.2f} rad/s")

    def init(self, screen_size):
        """Record the bounding rectangle used for position clamping."""
        width, height = screen_size
        if width <= 0 or height <= 0:
            raise ValueError(f"Screen size must be positive, got {screen_size}")
        self.screen_size = pygame.Vector2(width, height)

    # ===========================================================
    # Frame Cycle
    # ===========================================================
    def update(self, dt: float, flags: InputFlags):
        """Integrate one frame of motion from the given input snapshot."""
        update_movement(self, dt, flags)

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def start(self, pos):
        """Place the player at pos and bring it back to life."""
        self.position = pygame.Vector2(pos)
        self.velocity = pygame.Vector2(0, 0)
        self.death_state = LifecycleState.ALIVE
        self.visible = True
        self.collision_enabled = True
        DebugLogger.state(f"Player started at ({self.position.x:.1f}, {self.position.y:.1f})",
                          category="player")

    def on_collision(self, other=None):
        """
        Handle a collision reported by the collision system.

        Only the first collision of a life counts: the player hides, stops
        taking collisions and emits the hit notification. Later calls before
        start() are ignored.
        """
        if not self.alive:
            DebugLogger.trace("Player already dead", category="collision")
            return

        self.death_state = LifecycleState.DEAD
        self.visible = False
        self.collision_enabled = False

        source = f" by bullet #{other.id}" if getattr(other, "id", None) is not None else ""
        DebugLogger.action(f"Player hit{source}", category="collision")

        if self.on_hit is not None:
            self.on_hit()

    # ===========================================================
    # Queries
    # ===========================================================
    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    @property
    def heading(self) -> float:
        """Orientation normalized into [0, 2π)."""
        return wrap_angle(self.orientation)

    @property
    def hitbox(self) -> AABB:
        return AABB.from_center(self.position, self.hitbox_size)

    def snapshot(self) -> dict:
        return {
            "position": (self.position.x, self.position.y),
            "orientation": self.orientation,
            "alive": self.alive,
        }

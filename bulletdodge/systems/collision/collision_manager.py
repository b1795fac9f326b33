"""
collision_manager.py
--------------------
Player-versus-bullet collision detection.
Uses spatial hashing to reduce redundant checks and delegates the
response to the player's on_collision().

Responsibilities
----------------
- Rebuild the broad-phase grid from live bullets each frame.
- Confirm candidate overlaps against the player's hitbox.
- Only test tag pairs listed in the collision rules.
- Stay silent while the player's collision response is disabled.
- Provide optional hitbox debug visualization.
"""

import pygame

from bulletdodge.core.debug.debug_logger import DebugLogger
from bulletdodge.core.runtime.game_settings import Bounds, Debug
from bulletdodge.entities.entity_types import CollisionTags
from bulletdodge.systems.collision.spatial_hash import SpatialHashGrid


class CollisionManager:
    """Detects collisions but lets the player decide what happens."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, player, bullet_manager, cell_size=Bounds.COLLISION_CELL_SIZE, rules=None):
        """
        Args:
            player: PlayerController to test against.
            bullet_manager: BulletManager holding the active bullets.
            cell_size (float): Broad-phase grid cell size in px.
            rules (set[tuple[str, str]]): Tag pairs that collide, in either order.
        """
        self.player = player
        self.bullet_manager = bullet_manager
        self.rules = rules if rules is not None else {
            (CollisionTags.ENEMY_BULLET, CollisionTags.PLAYER),
        }
        self.grid = SpatialHashGrid(player.screen_size.x, player.screen_size.y, cell_size)

        DebugLogger.init_entry("CollisionManager Initialized")

    # ===========================================================
    # Detection
    # ===========================================================
    def detect(self) -> list:
        """
        Find bullets overlapping the player and report the first hit.

        Returns:
            list[int]: Ids of all bullets overlapping the player this frame,
            in ascending order. Empty while collision is disabled.
        """
        player = self.player
        if not player.collision_enabled:
            return []

        bullets = {
            b.id: b for b in self.bullet_manager.active
            if b.alive and self._can_collide(player.collision_tag, b.collision_tag)
        }
        if not bullets:
            return []

        self.grid.clear()
        for bullet_id, bullet in bullets.items():
            self.grid.insert(bullet_id, bullet.hitbox)

        player_box = player.hitbox
        hits = sorted(
            bullet_id for bullet_id in self.grid.query(player_box)
            if bullets[bullet_id].hitbox.intersects(player_box)
        )

        if hits:
            DebugLogger.trace(f"Player overlaps bullets {hits}", category="collision")
            player.on_collision(bullets[hits[0]])

        return hits

    def _can_collide(self, a_tag, b_tag) -> bool:
        return (a_tag, b_tag) in self.rules or (b_tag, a_tag) in self.rules

    # ===========================================================
    # Debug Visualization
    # ===========================================================
    def draw_debug(self, surface):
        """Outline every hitbox on the given pygame.Surface."""
        if not Debug.HITBOX_VISIBLE:
            return

        width = Debug.HITBOX_LINE_WIDTH
        if self.player.visible:
            pygame.draw.rect(surface, (60, 160, 255), self.player.hitbox.to_rect(), width)
        for bullet in self.bullet_manager.active:
            pygame.draw.rect(surface, (255, 60, 60), bullet.hitbox.to_rect(), width)

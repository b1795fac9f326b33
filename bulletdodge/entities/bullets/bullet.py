"""
bullet.py
---------
Defines the projectile entity created by the bullet factory.

Responsibilities
----------------
- Hold id, position, rotation and linear velocity.
- Move in a fixed straight line; nothing steers a bullet after spawn.
- Expose a hitbox for the collision system.
"""

import pygame

from bulletdodge.core.runtime.game_settings import Spawner
from bulletdodge.entities.entity_state import LifecycleState
from bulletdodge.entities.entity_types import CollisionTags
from bulletdodge.systems.collision.aabb import AABB


class Bullet:
    """Straight-line projectile."""

    __slots__ = ('id', 'position', 'velocity', 'rotation', 'size',
                 'death_state', 'collision_tag')

    def __init__(self, bullet_id: int, pos, rotation: float, vel, size=Spawner.BULLET_SIZE):
        """
        Args:
            bullet_id (int): Unique id assigned by the factory.
            pos (tuple[float, float]): Starting position.
            rotation (float): Facing angle in radians.
            vel (tuple[float, float]): Velocity vector in px/s.
            size (tuple[float, float]): Hitbox width and height.
        """
        self.id = bullet_id
        self.position = pygame.Vector2(pos)
        self.velocity = pygame.Vector2(vel)
        self.rotation = rotation
        self.size = tuple(size)
        self.death_state = LifecycleState.ALIVE
        self.collision_tag = CollisionTags.ENEMY_BULLET

    def update(self, dt: float):
        """Advance along the velocity vector."""
        self.position += self.velocity * dt

    def kill(self):
        self.death_state = LifecycleState.DEAD

    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    @property
    def hitbox(self) -> AABB:
        return AABB.from_center(self.position, self.size)

    def snapshot(self) -> dict:
        return {
            "id": self.id,
            "position": (self.position.x, self.position.y),
            "velocity": (self.velocity.x, self.velocity.y),
            "rotation": self.rotation,
        }

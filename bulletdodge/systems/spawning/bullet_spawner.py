"""
bullet_spawner.py
-----------------
Emits one projectile per timer tick from a random point on the spawn path.

Responsibilities
----------------
- Sample a uniformly random point and tangent along the bound path.
- Aim the projectile perpendicular to the path, plus random jitter.
- Pick a random speed and hand the result to the projectile factory.

Each tick is independent; apart from the bound collaborators and the
random source the spawner holds no state between ticks.
"""

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

import pygame

from bulletdodge.core.debug.debug_logger import DebugLogger
from bulletdodge.core.runtime.game_settings import Spawner
from bulletdodge.core.utils.math_utils import from_angle


class ProjectileFactory(ABC):
    """Creates a live projectile and inserts it into the scene."""

    @abstractmethod
    def spawn(self, pos, direction: float, velocity):
        """
        Args:
            pos (pygame.Vector2): Initial position.
            direction (float): Initial rotation in radians.
            velocity (pygame.Vector2): Initial linear velocity in px/s.
        """


@dataclass(frozen=True)
class SpawnEvent:
    """Initial state of one projectile, fully decided at spawn time."""
    position: pygame.Vector2
    direction: float
    speed: float
    velocity: pygame.Vector2


class BulletSpawner:
    """Timer-driven projectile emitter."""

    def __init__(self, rng=None, min_speed: float = Spawner.MIN_SPEED,
                 max_speed: float = Spawner.MAX_SPEED,
                 direction_jitter: float = Spawner.DIRECTION_JITTER):
        """
        Args:
            rng: Random source exposing uniform(a, b). Defaults to random.Random().
            min_speed (float): Lower bound of projectile speed (px/s).
            max_speed (float): Upper bound of projectile speed (px/s).
            direction_jitter (float): Max deviation from the path normal (radians).
        """
        if min_speed > max_speed:
            raise ValueError(f"min_speed {min_speed} exceeds max_speed {max_speed}")
        if direction_jitter < 0:
            raise ValueError(f"direction_jitter must be non-negative, got {direction_jitter}")

        self.rng = rng if rng is not None else random.Random()
        self.min_speed = min_speed
        self.max_speed = max_speed
        self.direction_jitter = direction_jitter

        self.path_sampler = None
        self.bullet_factory = None

    def configure(self, path_sampler, bullet_factory):
        """Bind the path to sample and the factory that creates projectiles."""
        self.path_sampler = path_sampler
        self.bullet_factory = bullet_factory
        DebugLogger.system(
            f"Spawner bound to {type(path_sampler).__name__} -> {type(bullet_factory).__name__}",
            category="spawner"
        )

    @property
    def configured(self) -> bool:
        return self.path_sampler is not None and self.bullet_factory is not None

    # ===========================================================
    # Spawning
    # ===========================================================
    def roll_spawn(self) -> SpawnEvent:
        """
        Draw one spawn from the random source.

        Draw order is fixed: path parameter, direction jitter, speed.
        """
        t = self.rng.uniform(0.0, 1.0)
        jitter = self.rng.uniform(-self.direction_jitter, self.direction_jitter)
        speed = self.rng.uniform(self.min_speed, self.max_speed)

        pos, tangent = self.path_sampler.sample_at(t)
        direction = tangent + math.pi / 2 + jitter
        velocity = from_angle(speed, direction)

        return SpawnEvent(position=pygame.Vector2(pos), direction=direction,
                          speed=speed, velocity=velocity)

    def on_spawn_tick(self):
        """Timer callback: request exactly one new projectile."""
        if not self.configured:
            raise RuntimeError("BulletSpawner.on_spawn_tick() called before configure()")

        event = self.roll_spawn()
        self.bullet_factory.spawn(event.position, event.direction, event.velocity)

        DebugLogger.trace(
            f"Spawn at ({event.position.x:.0f}, {event.position.y:.0f}) "
            f"dir={event.direction:.2f} speed={event.speed:.0f}",
            category="spawner"
        )

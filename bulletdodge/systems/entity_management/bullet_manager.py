"""
bullet_manager.py
-----------------
System responsible for managing all bullet entities during gameplay.

Responsibilities
----------------
- Act as the projectile factory for the bullet spawner.
- Update bullet positions each frame.
- Remove bullets that have left the screen by more than the cull margin.
- Clear the field when a new game starts.
"""

from bulletdodge.core.debug.debug_logger import DebugLogger
from bulletdodge.core.runtime.game_settings import Bounds, Display, Spawner
from bulletdodge.core.services.event_manager import get_events, BulletSpawnedEvent
from bulletdodge.entities.bullets.bullet import Bullet
from bulletdodge.systems.spawning.bullet_spawner import ProjectileFactory


class BulletManager(ProjectileFactory):
    """Creates, moves and culls all active bullets."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, screen_size=(Display.WIDTH, Display.HEIGHT),
                 bullet_size=Spawner.BULLET_SIZE, cull_margin=Bounds.BULLET_CULL_MARGIN):
        """
        Args:
            screen_size (tuple[int, int]): Playfield width and height.
            bullet_size (tuple[float, float]): Hitbox size for new bullets.
            cull_margin (float): Distance outside the screen before a bullet is removed.
        """
        self.screen_width, self.screen_height = screen_size
        self.bullet_size = tuple(bullet_size)
        self.cull_margin = cull_margin
        self.active = []  # Active bullets currently in flight
        self._next_id = 1

        DebugLogger.init_entry("BulletManager Initialized")

    # ===========================================================
    # Spawning
    # ===========================================================
    def spawn(self, pos, direction, velocity) -> Bullet:
        """
        Create a bullet and add it to the live set.

        Args:
            pos (tuple[float, float]): Starting position.
            direction (float): Initial rotation in radians.
            velocity (tuple[float, float]): Velocity vector.
        """
        bullet = Bullet(self._next_id, pos, direction, velocity, size=self.bullet_size)
        self._next_id += 1
        self.active.append(bullet)

        get_events().dispatch(BulletSpawnedEvent(
            bullet_id=bullet.id,
            position=(bullet.position.x, bullet.position.y),
            velocity=(bullet.velocity.x, bullet.velocity.y),
            source=self,
        ))
        return bullet

    # ===========================================================
    # Update Cycle
    # ===========================================================
    def update(self, dt):
        """Move every bullet, then drop the dead and the off-screen."""
        for bullet in self.active:
            bullet.update(dt)
            if self._is_offscreen(bullet):
                bullet.kill()

        before = len(self.active)
        self.active = [b for b in self.active if b.alive]
        removed = before - len(self.active)
        if removed:
            DebugLogger.trace(f"Culled {removed} bullet(s), {len(self.active)} left", category="bullet")

    def _is_offscreen(self, bullet) -> bool:
        margin = self.cull_margin
        x, y = bullet.position
        return (x < -margin or x > self.screen_width + margin or
                y < -margin or y > self.screen_height + margin)

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def clear(self):
        """Remove all bullets. Ids keep counting up across games."""
        count = len(self.active)
        for bullet in self.active:
            bullet.kill()
        self.active.clear()
        DebugLogger.state(f"Cleared {count} bullet(s)", category="bullet")

    def get(self, bullet_id):
        """Return the live bullet with this id, or None."""
        for bullet in self.active:
            if bullet.id == bullet_id:
                return bullet
        return None

    def snapshot(self) -> list:
        return [b.snapshot() for b in self.active]

"""
Projectile spawning.

Exports:
    BulletSpawner     - Timer-driven emitter
    ProjectileFactory - Interface the spawner hands projectiles to
    PolylinePath      - Arc-length path sampler
    screen_edge_path  - Default clockwise path around the screen
"""

from bulletdodge.systems.spawning.path_sampler import PathSampler, PolylinePath, screen_edge_path
from bulletdodge.systems.spawning.bullet_spawner import BulletSpawner, ProjectileFactory, SpawnEvent

__all__ = [
    'PathSampler',
    'PolylinePath',
    'screen_edge_path',
    'BulletSpawner',
    'ProjectileFactory',
    'SpawnEvent',
]

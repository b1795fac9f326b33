"""
bulletdodge/entities/__init__.py
--------------------------------
Entity module exports.

Provides core entity states and type constants used across all game entities.

Exports:
    LifecycleState  - Entity life/death progression (ALIVE, DEAD)
    CollisionTags   - Collision tag constants (PLAYER, ENEMY_BULLET)
"""

from bulletdodge.entities.entity_state import LifecycleState
from bulletdodge.entities.entity_types import CollisionTags

__all__ = [
    'LifecycleState',
    'CollisionTags',
]

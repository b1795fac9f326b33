"""
entity_state.py
---------------
Defines runtime state enumerations for all entity types.
Contains only states that change over time during gameplay.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks the life/death progression of an entity.
    Used for collision gating and cleanup timing.
    """
    ALIVE = 0
    DEAD = 1       # Ready for cleanup

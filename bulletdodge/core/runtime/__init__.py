"""
Runtime configuration exports.

Provides game-wide constants and settings. All exports are lightweight
class constants with no initialization overhead.
"""

from bulletdodge.core.runtime.game_settings import (
    Display,
    Physics,
    Player,
    Spawner,
    Timers,
    Bounds,
    Debug,
)
from bulletdodge.core.runtime.session_stats import get_session_stats

__all__ = [
    # Display
    'Display',
    # Configuration
    'Physics',
    'Player',
    'Spawner',
    'Timers',
    'Bounds',
    # Debug
    'Debug',
    # Session
    'get_session_stats',
]

"""
Core services exports.

Provides the event system, timers and configuration loading.
"""

from bulletdodge.core.services.config_manager import load_config
from bulletdodge.core.services.event_manager import (
    get_events,
    BaseEvent,
    GameStateChangedEvent,
    BulletSpawnedEvent,
)
from bulletdodge.core.services.timer_service import TimerService

__all__ = [
    # Config
    'load_config',
    # Events
    'get_events',
    'BaseEvent',
    'GameStateChangedEvent',
    'BulletSpawnedEvent',
    # Services
    'TimerService',
]

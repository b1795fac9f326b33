"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets the spawner, game flow and session statistics talk without direct
dependencies.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from bulletdodge.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class GameStateChangedEvent(BaseEvent):
    """Dispatched when the game flow changes state."""
    previous: object
    current: object


@dataclass(frozen=True)
class BulletSpawnedEvent(BaseEvent):
    """Dispatched when the projectile factory creates a bullet."""
    bullet_id: int
    position: tuple
    velocity: tuple
    source: object = None  # BulletManager that created it


# ===========================================================
# Event Manager
# ===========================================================
class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event_manager")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        subscribers = self._subscribers.get(event_type)
        if subscribers and callback in subscribers:
            subscribers.remove(callback)

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and does not stop the others.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Count subscribers for one event type, or in total."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())


# ===========================================================
# Singleton Access
# ===========================================================

_EVENTS = None


def get_events() -> EventManager:
    """Get or create the event manager singleton."""
    global _EVENTS
    if _EVENTS is None:
        _EVENTS = EventManager()
    return _EVENTS


def reset_events() -> None:
    """Reset the singleton. Call on full game restart."""
    global _EVENTS
    _EVENTS = None

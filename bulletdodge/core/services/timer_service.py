"""
timer_service.py
----------------
Named countdown timers ticked by the host loop.

Responsibilities
----------------
- Own one-shot and recurring timers keyed by name.
- Fire timer callbacks from update(dt), once per elapsed interval.
- Keep start/stop idempotent so game flow code can call them freely.
"""

from typing import Callable, Dict

from bulletdodge.core.debug.debug_logger import DebugLogger


class Timer:
    """Single countdown with a fixed wait time."""

    __slots__ = ("name", "wait_time", "callback", "one_shot", "time_left", "active")

    def __init__(self, name: str, wait_time: float, callback: Callable[[], None],
                 one_shot: bool = False):
        if wait_time <= 0:
            raise ValueError(f"Timer '{name}' needs a positive wait time, got {wait_time}")

        self.name = name
        self.wait_time = wait_time
        self.callback = callback
        self.one_shot = one_shot
        self.time_left = wait_time
        self.active = False


class TimerService:
    """Registry of named timers advanced once per frame."""

    def __init__(self):
        self._timers: Dict[str, Timer] = {}

    # ===========================================================
    # Registration
    # ===========================================================
    def add_timer(self, name: str, wait_time: float, callback: Callable[[], None],
                  one_shot: bool = False) -> Timer:
        """
        Register a stopped timer.

        Args:
            name: Unique timer key.
            wait_time: Seconds between firings.
            callback: Zero-argument function called on expiry.
            one_shot: Stop after the first firing.
        """
        timer = Timer(name, wait_time, callback, one_shot)
        self._timers[name] = timer
        DebugLogger.system(
            f"Timer '{name}' registered ({wait_time:.2f}s, {'one-shot' if one_shot else 'recurring'})",
            category="timer"
        )
        return timer

    def get(self, name: str) -> Timer:
        """Return the timer registered under name (KeyError if unknown)."""
        return self._timers[name]

    # ===========================================================
    # Control
    # ===========================================================
    def start(self, name: str) -> None:
        """Start or restart the countdown."""
        timer = self._timers[name]
        timer.time_left = timer.wait_time
        timer.active = True
        DebugLogger.trace(f"Timer '{name}' started", category="timer")

    def stop(self, name: str) -> None:
        """Stop the countdown. Stopping a stopped timer does nothing."""
        timer = self._timers[name]
        if timer.active:
            timer.active = False
            DebugLogger.trace(f"Timer '{name}' stopped", category="timer")

    def stop_all(self) -> None:
        """Stop every registered timer."""
        for name in self._timers:
            self.stop(name)

    def is_active(self, name: str) -> bool:
        return self._timers[name].active

    def active_names(self) -> list:
        return [name for name, timer in self._timers.items() if timer.active]

    # ===========================================================
    # Frame Cycle
    # ===========================================================
    def update(self, dt: float) -> None:
        """
        Advance all active timers by dt and fire expired callbacks.

        Callbacks may start or stop any timer, including their own. A timer
        started by a callback begins counting on the next update.
        """
        running = [timer for timer in self._timers.values() if timer.active]
        for timer in running:
            if not timer.active:
                continue

            timer.time_left -= dt
            while timer.active and timer.time_left <= 0:
                if timer.one_shot:
                    timer.active = False
                else:
                    timer.time_left += timer.wait_time
                timer.callback()

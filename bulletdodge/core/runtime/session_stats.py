"""
session_stats.py
----------------
Tracks statistics for the current game session/run.
Separated from entity management and game flow.
"""


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-specific statistics. Reset when starting a new game."""

    def __init__(self):
        self.score = 0
        self.high_score = 0
        self.run_time = 0.0
        self.bullets_spawned = 0
        self.games_played = 0

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_score(self, amount: int = 1):
        """Add to current score and update high score."""
        self.score += amount
        if self.score > self.high_score:
            self.high_score = self.score

    def add_time(self, dt: float):
        """Add elapsed time to run timer."""
        self.run_time += dt

    def add_bullet(self):
        """Increment spawned bullet count."""
        self.bullets_spawned += 1

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all stats for new run. Preserves high score."""
        self.score = 0
        self.run_time = 0.0
        self.bullets_spawned = 0

    def full_reset(self):
        """Reset everything including high score."""
        self.reset()
        self.high_score = 0
        self.games_played = 0


# ===========================================================
# Singleton Access
# ===========================================================

_SESSION_STATS = None


def get_session_stats() -> SessionStats:
    """Get or create the session stats singleton."""
    global _SESSION_STATS
    if _SESSION_STATS is None:
        _SESSION_STATS = SessionStats()
    return _SESSION_STATS


def reset_session_stats() -> None:
    """Reset the singleton. Call on full game restart."""
    global _SESSION_STATS
    _SESSION_STATS = None

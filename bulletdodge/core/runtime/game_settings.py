"""
game_settings.py
----------------
Centralized constants for all game systems.

Values here are the built-in defaults; config/game.json may override the
gameplay tuning sections at startup (see config_manager.load_config).
"""

import math


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 480
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Bullet Dodge"
    BACKGROUND = (12, 14, 28)


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Physics and update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Player Defaults
# ===========================================================

class Player:
    """Player motion and collision defaults."""
    MOVE_SPEED: float = 300.0     # px/s
    TURN_SPEED: float = math.pi   # rad/s
    HITBOX_SIZE = (36, 36)


# ===========================================================
# Bullet Spawning
# ===========================================================

class Spawner:
    """Projectile spawn randomisation."""
    MIN_SPEED: float = 150.0
    MAX_SPEED: float = 250.0
    DIRECTION_JITTER: float = math.pi / 4
    BULLET_SIZE = (20, 20)
    SEED = None   # None -> nondeterministic


# ===========================================================
# Timers
# ===========================================================

class Timers:
    """Wait times (seconds) for the game flow timers."""
    START_DELAY: float = 2.0
    SPAWN_INTERVAL: float = 0.5
    SCORE_INTERVAL: float = 1.0


# ===========================================================
# Bounds & Margins
# ===========================================================

class Bounds:
    """Margin values for entity lifecycle management."""
    BULLET_CULL_MARGIN: int = 100
    COLLISION_CELL_SIZE: int = 64


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
    HITBOX_LINE_WIDTH: int = 1

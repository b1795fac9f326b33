"""
game_config.py
--------------
Handles gameplay configuration loading with default fallbacks.

The game always starts even if game.json is missing or incomplete: every
section is seeded from the constants in game_settings.py.
"""

from bulletdodge.core.runtime.game_settings import Player, Spawner, Timers
from bulletdodge.core.services.config_manager import load_config


# ===========================================================
# Default Fallback Configuration
# ===========================================================
DEFAULT_CONFIG = {
    "player": {
        "move_speed": Player.MOVE_SPEED,
        "turn_speed": Player.TURN_SPEED,
        "hitbox_size": list(Player.HITBOX_SIZE),
    },
    "spawner": {
        "min_speed": Spawner.MIN_SPEED,
        "max_speed": Spawner.MAX_SPEED,
        "direction_jitter": Spawner.DIRECTION_JITTER,
        "bullet_size": list(Spawner.BULLET_SIZE),
        "seed": Spawner.SEED,
    },
    "timers": {
        "start_delay": Timers.START_DELAY,
        "spawn_interval": Timers.SPAWN_INTERVAL,
        "score_interval": Timers.SCORE_INTERVAL,
    },
}


def load_game_config(filename="game.json", strict=False):
    """
    Load game.json and apply fallback defaults for missing fields.

    Returns:
        dict: Complete game configuration dictionary.
    """
    return load_config(filename, DEFAULT_CONFIG, strict=strict)

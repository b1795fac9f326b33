"""
game_controller.py
------------------
Game flow glue between the player, the bullet spawner and the host timers.

States
------
IDLE -> PLAYING -> GAME_OVER -> PLAYING (on restart)

- Entering PLAYING starts the player and a one-shot grace timer.
- Grace expiry starts the recurring spawn and score timers.
- The player's hit notification stops every timer and ends the game.
"""

import random
from enum import Enum

import pygame

from bulletdodge.core.debug.debug_logger import DebugLogger
from bulletdodge.core.runtime.game_config import load_game_config
from bulletdodge.core.runtime.game_settings import Display, Timers
from bulletdodge.core.runtime.session_stats import get_session_stats
from bulletdodge.core.services.event_manager import (
    get_events,
    BulletSpawnedEvent,
    GameStateChangedEvent,
)
from bulletdodge.core.services.timer_service import TimerService
from bulletdodge.entities.player.player_core import PlayerController
from bulletdodge.entities.player.player_input import NO_INPUT
from bulletdodge.systems.collision.collision_manager import CollisionManager
from bulletdodge.systems.entity_management.bullet_manager import BulletManager
from bulletdodge.systems.spawning.bullet_spawner import BulletSpawner
from bulletdodge.systems.spawning.path_sampler import screen_edge_path


START_TIMER = "start"
SPAWN_TIMER = "spawn"
SCORE_TIMER = "score"


class GameState(Enum):
    """Top-level game flow states."""
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameController:
    """Coordinates player, spawner and timers - owns no gameplay math."""

    def __init__(self, player, spawner, bullet_manager, collision_manager=None,
                 timers=None, start_pos=None,
                 start_delay=Timers.START_DELAY,
                 spawn_interval=Timers.SPAWN_INTERVAL,
                 score_interval=Timers.SCORE_INTERVAL,
                 seed=None):
        """
        Args:
            player (PlayerController): Ship controller; its on_hit is taken over.
            spawner (BulletSpawner): Already configured spawner.
            bullet_manager (BulletManager): Projectile factory and bullet store.
            collision_manager (CollisionManager): Built from player and bullets if omitted.
            timers (TimerService): Host timer service; a private one if omitted.
            start_pos: Player spawn point; screen center if omitted.
            start_delay (float): Grace period before bullets appear.
            spawn_interval (float): Seconds between spawn ticks.
            score_interval (float): Seconds per score point.
            seed: Seed the spawner's random source was built from, for snapshots.
        """
        self.player = player
        self.spawner = spawner
        self.bullet_manager = bullet_manager
        self.collision_manager = collision_manager or CollisionManager(player, bullet_manager)
        self.timers = timers or TimerService()
        self.seed = seed

        if start_pos is None:
            start_pos = player.screen_size / 2
        self.start_pos = pygame.Vector2(start_pos)

        self.state = GameState.IDLE
        self.stats = get_session_stats()

        self.player.on_hit = self._on_player_hit

        self.timers.add_timer(START_TIMER, start_delay, self._on_start_timeout, one_shot=True)
        self.timers.add_timer(SPAWN_TIMER, spawn_interval, self.spawner.on_spawn_tick)
        self.timers.add_timer(SCORE_TIMER, score_interval, self._on_score_tick)

        get_events().subscribe(BulletSpawnedEvent, self._on_bullet_spawned)

        DebugLogger.init_entry("GameController Initialized")

    # ===========================================================
    # Game Flow
    # ===========================================================
    def new_game(self):
        """Start a run from IDLE or GAME_OVER."""
        if self.state is GameState.PLAYING:
            raise RuntimeError("new_game() called while a game is already running")

        self.bullet_manager.clear()
        self.stats.reset()
        self.stats.games_played += 1

        self.player.start(self.start_pos)
        self.timers.start(START_TIMER)
        self._set_state(GameState.PLAYING)

    def _on_start_timeout(self):
        """Grace period over: bullets start coming."""
        self.timers.start(SPAWN_TIMER)
        self.timers.start(SCORE_TIMER)
        DebugLogger.state("Grace period over, spawning started", category="game_state")

    def _on_score_tick(self):
        self.stats.add_score(1)

    def _on_player_hit(self):
        """Hit notification from the player: end the run."""
        self.timers.stop_all()
        self._set_state(GameState.GAME_OVER)
        DebugLogger.state(
            f"Game over - score {self.stats.score} (best {self.stats.high_score})",
            category="game_state"
        )

    def _on_bullet_spawned(self, event):
        if event.source is self.bullet_manager:
            self.stats.add_bullet()

    def _set_state(self, new_state):
        previous = self.state
        self.state = new_state
        DebugLogger.state(f"{previous.name} -> {new_state.name}", category="game_state")
        get_events().dispatch(GameStateChangedEvent(previous=previous, current=new_state))

    def shutdown(self):
        """Stop timers and detach from the event bus. Call when the game is torn down."""
        self.timers.stop_all()
        get_events().unsubscribe(BulletSpawnedEvent, self._on_bullet_spawned)
        DebugLogger.system("GameController shut down", category="game_state")

    # ===========================================================
    # Frame Cycle
    # ===========================================================
    def update(self, dt: float, flags=NO_INPUT):
        """
        Advance one frame.

        Args:
            dt (float): Delta time in seconds.
            flags (InputFlags): Directional input for the player.
        """
        if self.state is GameState.IDLE:
            return

        playing = self.state is GameState.PLAYING
        if playing:
            self.stats.add_time(dt)
            self.timers.update(dt)
            self.player.update(dt, flags)

        self.bullet_manager.update(dt)

        if playing:
            self.collision_manager.detect()

    # ===========================================================
    # Queries
    # ===========================================================
    def snapshot(self) -> dict:
        """Plain-data view of the current run."""
        return {
            "time": self.stats.run_time,
            "seed": self.seed,
            "state": self.state.value,
            "score": self.stats.score,
            "player": self.player.snapshot(),
            "bullets": self.bullet_manager.snapshot(),
        }


# ===========================================================
# Assembly
# ===========================================================
def build_game(config=None, seed=None, screen_size=(Display.WIDTH, Display.HEIGHT)) -> GameController:
    """
    Wire every collaborator from configuration.

    Args:
        config (dict): Game configuration; loaded from game.json if omitted.
        seed: Overrides the configured spawner seed when not None.
        screen_size (tuple[int, int]): Playfield width and height.
    """
    if config is None:
        config = load_game_config()

    player_cfg = config["player"]
    spawner_cfg = config["spawner"]
    timer_cfg = config["timers"]

    if seed is None:
        seed = spawner_cfg.get("seed")

    player = PlayerController(
        screen_size,
        move_speed=player_cfg["move_speed"],
        turn_speed=player_cfg["turn_speed"],
        hitbox_size=player_cfg["hitbox_size"],
    )
    bullet_manager = BulletManager(screen_size, bullet_size=spawner_cfg["bullet_size"])

    spawner = BulletSpawner(
        rng=random.Random(seed),
        min_speed=spawner_cfg["min_speed"],
        max_speed=spawner_cfg["max_speed"],
        direction_jitter=spawner_cfg["direction_jitter"],
    )
    spawner.configure(screen_edge_path(*screen_size), bullet_manager)

    return GameController(
        player, spawner, bullet_manager,
        start_delay=timer_cfg["start_delay"],
        spawn_interval=timer_cfg["spawn_interval"],
        score_interval=timer_cfg["score_interval"],
        seed=seed,
    )

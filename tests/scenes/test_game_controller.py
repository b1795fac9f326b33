"""
test_game_controller.py
-----------------------
Game flow tests: grace period, spawning and scoring timers, the hit that
ends a run, and restarting.

Uses a real player, bullet manager and timer service with a mocked spawner
so bullets only appear where a test puts them.
"""

import pytest
from unittest.mock import MagicMock

from bulletdodge.core.runtime.session_stats import reset_session_stats
from bulletdodge.core.services.event_manager import (
    BulletSpawnedEvent, GameStateChangedEvent, get_events, reset_events
)
from bulletdodge.entities.player.player_core import PlayerController
from bulletdodge.entities.player.player_input import InputFlags
from bulletdodge.scenes.game.game_controller import (
    GameController, GameState, SCORE_TIMER, SPAWN_TIMER, START_TIMER, build_game
)
from bulletdodge.systems.entity_management.bullet_manager import BulletManager


SCREEN = (480, 720)


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def spawner():
    return MagicMock()


@pytest.fixture
def game(spawner):
    player = PlayerController(SCREEN)
    bullets = BulletManager(SCREEN)
    return GameController(player, spawner, bullets,
                          start_delay=2.0, spawn_interval=0.5, score_interval=1.0)


def advance(game, seconds, step=0.25, flags=None):
    for _ in range(int(seconds / step)):
        if flags is None:
            game.update(step)
        else:
            game.update(step, flags)


def hit_player(game):
    """Drop a still bullet on the ship and run one frame."""
    game.bullet_manager.spawn(game.player.position, 0.0, (0, 0))
    game.update(0.25)


# ===========================================================
# Start
# ===========================================================

class TestNewGame:

    def test_starts_idle(self, game):
        assert game.state is GameState.IDLE
        assert not game.player.alive
        assert game.timers.active_names() == []

    def test_new_game_starts_player_and_grace_timer(self, game):
        game.new_game()

        assert game.state is GameState.PLAYING
        assert game.player.alive
        assert (game.player.position.x, game.player.position.y) == (240, 360)
        assert game.timers.active_names() == [START_TIMER]

    def test_idle_update_does_nothing(self, game):
        bullet = game.bullet_manager.spawn((10, 10), 0.0, (100, 0))

        game.update(1.0)

        assert bullet.position.x == 10
        assert game.stats.run_time == 0.0

    def test_new_game_while_playing_raises(self, game):
        game.new_game()

        with pytest.raises(RuntimeError):
            game.new_game()

    def test_state_changes_are_dispatched(self, game):
        seen = []
        get_events().subscribe(GameStateChangedEvent, lambda e: seen.append((e.previous, e.current)))

        game.new_game()
        hit_player(game)

        assert seen == [
            (GameState.IDLE, GameState.PLAYING),
            (GameState.PLAYING, GameState.GAME_OVER),
        ]


# ===========================================================
# Timers
# ===========================================================

class TestTimers:

    def test_no_spawns_during_grace(self, game, spawner):
        game.new_game()
        advance(game, 1.75)

        spawner.on_spawn_tick.assert_not_called()
        assert game.stats.score == 0

    def test_grace_expiry_starts_spawn_and_score(self, game):
        game.new_game()
        advance(game, 2.0)

        assert sorted(game.timers.active_names()) == sorted([SPAWN_TIMER, SCORE_TIMER])

    def test_spawn_and_score_rates(self, game, spawner):
        game.new_game()
        advance(game, 2.0 + 3.0)

        assert spawner.on_spawn_tick.call_count == 6
        assert game.stats.score == 3
        assert game.stats.run_time == pytest.approx(5.0)

    def test_player_moves_only_while_playing(self, game):
        game.new_game()
        advance(game, 0.5, flags=InputFlags(forward=True))

        assert game.player.position.x > 240


# ===========================================================
# Hit / Game Over
# ===========================================================

class TestGameOver:

    def test_hit_ends_the_run(self, game):
        game.new_game()
        advance(game, 3.0)

        hit_player(game)

        assert game.state is GameState.GAME_OVER
        assert game.timers.active_names() == []
        assert not game.player.visible

    def test_hit_during_grace_cancels_spawning(self, game, spawner):
        game.new_game()
        hit_player(game)

        advance(game, 5.0)

        spawner.on_spawn_tick.assert_not_called()

    def test_bullets_keep_flying_after_game_over(self, game):
        game.new_game()
        hit_player(game)
        mover = game.bullet_manager.spawn((100, 100), 0.0, (40, 0))
        time_at_hit = game.stats.run_time

        game.update(0.5, InputFlags(forward=True))

        assert mover.position.x == 120
        assert game.stats.run_time == time_at_hit
        assert game.player.position.x == 240

    def test_score_stops_at_hit(self, game):
        game.new_game()
        advance(game, 4.0)
        score = game.stats.score

        hit_player(game)
        advance(game, 3.0)

        assert game.stats.score == score


# ===========================================================
# Restart
# ===========================================================

class TestRestart:

    def test_restart_resets_run(self, game):
        game.new_game()
        advance(game, 5.0)
        hit_player(game)
        best = game.stats.high_score

        game.player.position.update(10, 10)
        game.new_game()

        assert game.state is GameState.PLAYING
        assert game.bullet_manager.active == []
        assert game.stats.score == 0
        assert game.stats.high_score == best
        assert game.stats.games_played == 2
        assert (game.player.position.x, game.player.position.y) == (240, 360)
        assert game.timers.active_names() == [START_TIMER]

    def test_custom_start_position(self, spawner):
        player = PlayerController(SCREEN)
        game = GameController(player, spawner, BulletManager(SCREEN), start_pos=(50, 60))

        game.new_game()

        assert (player.position.x, player.position.y) == (50, 60)


# ===========================================================
# Event Bus
# ===========================================================

class TestEventBus:

    def test_counts_only_its_own_bullets(self, game, spawner):
        other = GameController(PlayerController(SCREEN), spawner, BulletManager(SCREEN))

        other.bullet_manager.spawn((10, 10), 0.0, (0, 0))

        assert game.stats.bullets_spawned == 1
        game.bullet_manager.spawn((10, 10), 0.0, (0, 0))
        assert game.stats.bullets_spawned == 2

    def test_shutdown_detaches_from_bus(self, game):
        events = get_events()
        game.new_game()

        game.shutdown()
        game.bullet_manager.spawn((10, 10), 0.0, (0, 0))

        assert events.get_subscriber_count(BulletSpawnedEvent) == 0
        assert game.stats.bullets_spawned == 0
        assert game.timers.active_names() == []

    def test_rebuilt_games_do_not_accumulate_listeners(self):
        for _ in range(3):
            build_game(seed=1).shutdown()

        assert get_events().get_subscriber_count(BulletSpawnedEvent) == 0


# ===========================================================
# Assembly
# ===========================================================

class TestBuildGame:

    def run_seeded(self, seed, seconds=6.0):
        reset_events()
        reset_session_stats()
        game = build_game(seed=seed)
        game.new_game()
        advance(game, seconds)
        return game

    def test_spawned_bullets_are_counted(self):
        game = self.run_seeded(3, seconds=3.0)

        assert game.stats.bullets_spawned >= len(game.bullet_manager.active) > 0

    def test_same_seed_same_run(self):
        first = self.run_seeded(42).snapshot()
        second = self.run_seeded(42).snapshot()

        assert first == second
        assert first["seed"] == 42

    def test_different_seed_different_bullets(self):
        first = self.run_seeded(1, seconds=3.0).snapshot()
        second = self.run_seeded(2, seconds=3.0).snapshot()

        assert first["bullets"] != second["bullets"]

    def test_config_overrides(self):
        config = {
            "player": {"move_speed": 50.0, "turn_speed": 1.0, "hitbox_size": [10, 10]},
            "spawner": {"min_speed": 10.0, "max_speed": 20.0, "direction_jitter": 0.0,
                        "bullet_size": [4, 4], "seed": 5},
            "timers": {"start_delay": 0.5, "spawn_interval": 0.25, "score_interval": 1.0},
        }
        game = build_game(config)
        game.new_game()

        advance(game, 1.0)

        assert game.seed == 5
        assert game.player.move_speed == 50.0
        assert len(game.bullet_manager.active) == 2
        for bullet in game.bullet_manager.active:
            assert 10.0 - 1e-9 <= bullet.velocity.length() <= 20.0 + 1e-9

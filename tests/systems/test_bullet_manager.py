"""
test_bullet_manager.py
----------------------
Tests for bullet creation, straight-line motion and off-screen culling.
"""

import pytest
from unittest.mock import MagicMock

from bulletdodge.core.services.event_manager import BulletSpawnedEvent, get_events
from bulletdodge.entities.bullets.bullet import Bullet
from bulletdodge.systems.entity_management.bullet_manager import BulletManager


@pytest.fixture
def manager():
    return BulletManager((480, 720), bullet_size=(20, 20), cull_margin=100)


class TestBullet:

    def test_moves_along_velocity(self):
        bullet = Bullet(1, (10, 10), 0.0, (100, -50))

        bullet.update(0.5)

        assert (bullet.position.x, bullet.position.y) == (60, -15)
        assert bullet.alive

    def test_snapshot(self):
        bullet = Bullet(4, (1, 2), 0.5, (3, 4))

        assert bullet.snapshot() == {
            "id": 4, "position": (1, 2), "velocity": (3, 4), "rotation": 0.5,
        }


class TestBulletManager:

    def test_ids_increase_from_one(self, manager):
        ids = [manager.spawn((0, 0), 0.0, (0, 0)).id for _ in range(3)]
        assert ids == [1, 2, 3]

    def test_ids_keep_counting_after_clear(self, manager):
        manager.spawn((0, 0), 0.0, (0, 0))
        manager.clear()

        assert manager.active == []
        assert manager.spawn((0, 0), 0.0, (0, 0)).id == 2

    def test_spawn_dispatches_event(self, manager):
        listener = MagicMock()
        get_events().subscribe(BulletSpawnedEvent, listener)

        manager.spawn((5, 6), 1.0, (7, 8))

        event = listener.call_args.args[0]
        assert event == BulletSpawnedEvent(bullet_id=1, position=(5, 6), velocity=(7, 8), source=manager)

    def test_bullet_uses_configured_size(self, manager):
        bullet = manager.spawn((100, 100), 0.0, (0, 0))
        assert bullet.hitbox.width == 20

    def test_update_moves_all_bullets(self, manager):
        a = manager.spawn((100, 100), 0.0, (10, 0))
        b = manager.spawn((200, 200), 0.0, (0, -20))

        manager.update(1.0)

        assert a.position.x == 110
        assert b.position.y == 180

    def test_bullets_inside_margin_survive(self, manager):
        manager.spawn((-50, 360), 0.0, (0, 0))
        manager.spawn((540, 360), 0.0, (0, 0))

        manager.update(0.1)

        assert len(manager.active) == 2

    @pytest.mark.parametrize("pos, vel", [
        ((0, 360), (-200, 0)),
        ((480, 360), (200, 0)),
        ((240, 0), (0, -200)),
        ((240, 720), (0, 200)),
    ])
    def test_leaving_bullets_are_culled(self, manager, pos, vel):
        bullet = manager.spawn(pos, 0.0, vel)

        manager.update(0.6)  # 120 px out

        assert manager.active == []
        assert not bullet.alive

    def test_get(self, manager):
        bullet = manager.spawn((0, 0), 0.0, (0, 0))

        assert manager.get(bullet.id) is bullet
        assert manager.get(99) is None

    def test_snapshot_lists_live_bullets(self, manager):
        manager.spawn((1, 1), 0.0, (0, 0))
        manager.spawn((2, 2), 0.0, (0, 0))

        assert [b["id"] for b in manager.snapshot()] == [1, 2]

"""
conftest.py
-----------
Shared pytest configuration and fixtures for bulletdodge tests.

Contains:
- Headless SDL setup so pygame never opens a window
- Per-test reset of the event bus and session stats singletons
- Scripted random source for deterministic spawner tests
- Common collaborator mocks
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from unittest.mock import MagicMock

from bulletdodge.core.debug.debug_logger import LoggerConfig
from bulletdodge.core.runtime.session_stats import reset_session_stats
from bulletdodge.core.services.event_manager import reset_events


# ===========================================================
# Autouse Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output clean."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture(autouse=True)
def fresh_singletons():
    """Every test starts with an empty event bus and zeroed stats."""
    reset_events()
    reset_session_stats()
    yield
    reset_events()
    reset_session_stats()


# ===========================================================
# Test Utilities
# ===========================================================

class ScriptedRandom:
    """
    Random source that returns queued values from uniform() in order.

    Records the (a, b) bounds of every call so tests can check draw order.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def uniform(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def scripted_random():
    """Factory fixture: scripted_random([t, jitter, speed, ...])."""
    return ScriptedRandom


@pytest.fixture
def mock_bullet_factory():
    """Mock for the projectile factory."""
    factory = MagicMock()
    factory.spawn = MagicMock()
    return factory


@pytest.fixture
def fixed_path():
    """Path sampler that always returns (50, 50) with tangent 0."""
    sampler = MagicMock()
    sampler.sample_at.return_value = ((50.0, 50.0), 0.0)
    return sampler


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark tests as unit tests unless they say otherwise."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)

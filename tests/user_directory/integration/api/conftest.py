"""
Pytest configuration for API tests.

Each test gets an app bound to its own SQLite file and a recording
event publisher in place of the Kafka REST proxy.
"""

import pytest
from fastapi.testclient import TestClient

from tests.shared.fixtures.publishers import RecordingEventPublisher
from user_directory.presentation.api import create_app
from user_directory.presentation.api.dependencies import (
    get_engine,
    get_event_publisher,
    get_session_maker,
)
from user_directory_config import clear_settings_cache


def _clear_caches() -> None:
    clear_settings_cache()
    get_engine.cache_clear()
    get_session_maker.cache_clear()
    get_event_publisher.cache_clear()


@pytest.fixture
def api_publisher() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest.fixture
def api_env(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file."""
    monkeypatch.setenv("DB_URL", f"sqlite+aiosqlite:///{tmp_path / 'api.sqlite3'}")
    monkeypatch.setenv("EVENT_DELIVERY", "direct")
    _clear_caches()
    yield
    _clear_caches()


@pytest.fixture
def client(api_env, api_publisher):
    app = create_app()
    app.dependency_overrides[get_event_publisher] = lambda: api_publisher
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

"""
Pytest configuration for user_directory tests.

Re-exports the shared SQLite fixtures and provides publisher doubles.
"""

import pytest

from tests.shared.fixtures.database import (
    db_session,
    file_engine,
    memory_engine,
    session_maker,
)
from tests.shared.fixtures.publishers import (
    FailingEventPublisher,
    RecordingEventPublisher,
)

__all__ = [
    "db_session",
    "file_engine",
    "memory_engine",
    "session_maker",
]


@pytest.fixture
def recording_publisher() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest.fixture
def failing_publisher() -> FailingEventPublisher:
    return FailingEventPublisher()

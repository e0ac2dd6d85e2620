"""Shared pytest fixtures for all test domains."""

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
    "FailingEventPublisher",
    "RecordingEventPublisher",
    "db_session",
    "file_engine",
    "memory_engine",
    "session_maker",
]

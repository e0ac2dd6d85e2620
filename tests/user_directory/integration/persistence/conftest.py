"""
Pytest configuration for persistence integration tests.

PostgreSQL tests use Testcontainers; they only run when integration tests
are enabled.
"""

# Re-export shared container fixtures
from tests.shared.fixtures.postgres import (
    pg_engine,
    pg_session_maker,
    postgres_container,
)

__all__ = [
    "pg_engine",
    "pg_session_maker",
    "postgres_container",
]

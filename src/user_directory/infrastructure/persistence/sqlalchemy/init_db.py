"""Database engine and schema utilities."""

import logging
from pathlib import Path

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Registers the models on Base.metadata
import user_directory.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from user_directory.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> AsyncEngine:
    """Create an async engine, making sure a SQLite file has a directory."""
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create the users and outbox_events tables if they are missing.

    Safe to run repeatedly; existing tables are left as they are.
    """
    logger.info("Creating missing tables on %s", engine.url.render_as_string())

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.debug("Schema ready")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop every table this package defines. Destroys all data."""
    logger.warning("Dropping all tables on %s", engine.url.render_as_string())

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

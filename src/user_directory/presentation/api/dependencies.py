"""Request-scoped wiring for the API.

Engine, session maker and event publisher live once per process; each
request gets its own session and a UserService bound to it.
"""

from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from user_directory.application.ports import EventPublisher
from user_directory.application.services import UserService
from user_directory.infrastructure.messaging import KafkaRestProxyPublisher
from user_directory.infrastructure.persistence.sqlalchemy import (
    OutboxRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from user_directory.infrastructure.persistence.sqlalchemy.init_db import (
    build_engine,
    build_session_maker,
)
from user_directory_config.settings import Settings, get_settings

# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide engine built from ``Settings.database_url``."""
    return build_engine(get_settings().database_url)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return build_session_maker(get_engine())


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request.

    Services commit their own unit of work; whatever is left uncommitted is
    rolled back when the session closes.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Event Publisher (Singleton)
# -----------------------------------------------------------------------------


def build_event_publisher(settings: Settings) -> KafkaRestProxyPublisher:
    return KafkaRestProxyPublisher(
        base_url=settings.kafka_rest_url,
        topic=settings.kafka_topic,
        timeout=settings.kafka_timeout,
        enabled=settings.events_enabled,
    )


@lru_cache(maxsize=1)
def get_event_publisher() -> EventPublisher:
    """Get the shared event publisher (singleton).

    Shares one HTTP connection pool and one set of background tasks
    across requests.
    """
    return build_event_publisher(get_settings())


def get_api_settings() -> Settings:
    return get_settings()


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


def get_user_service(
    session: DBSession,
    publisher: Annotated[EventPublisher, Depends(get_event_publisher)],
    settings: Annotated[Settings, Depends(get_api_settings)],
) -> UserService:
    """Build a UserService scoped to the request's session."""
    outbox_repo = OutboxRepositorySQLAlchemy(session) if settings.uses_outbox else None
    return UserService(
        user_repository=UserRepositorySQLAlchemy(session),
        event_publisher=publisher,
        outbox_repository=outbox_repo,
        db_session=session,
    )


UserServiceDep = Annotated[UserService, Depends(get_user_service)]

"""SQLAlchemy implementation of OutboxRepository."""

import logging

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from user_directory.application.ports import OutboxEntry, OutboxRepository
from user_directory.domain.events import UserEvent
from user_directory.domain.shared.time import ensure_tz_aware, utc_now
from user_directory.infrastructure.persistence.sqlalchemy.models import (
    OutboxEventModel,
)
from user_directory.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_store_errors,
)

logger = logging.getLogger(__name__)

MAX_ERROR_LENGTH = 1000


class OutboxRepositorySQLAlchemy(OutboxRepository):
    """Stores outbox entries in the ``outbox_events`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, routing_key: str, event: UserEvent) -> None:
        model = OutboxEventModel(
            routing_key=routing_key,
            operation=event.operation.value,
            payload=event.to_dict(),
            attempts=0,
        )
        with translate_store_errors("outbox_add"):
            self._session.add(model)
            await self._session.flush()
        logger.debug("Recorded outbox entry %s (%s)", model.id, event.operation.value)

    async def list_pending(self, limit: int, max_attempts: int) -> list[OutboxEntry]:
        stmt = (
            select(OutboxEventModel)
            .where(OutboxEventModel.delivered_at.is_(None))
            .where(OutboxEventModel.attempts < max_attempts)
            .order_by(OutboxEventModel.id)
            .limit(limit)
        )
        with translate_store_errors("outbox_list_pending"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._map_to_entry(model) for model in models]

    async def mark_delivered(self, entry_id: int) -> None:
        stmt = (
            update(OutboxEventModel)
            .where(OutboxEventModel.id == entry_id)
            .values(delivered_at=utc_now())
        )
        with translate_store_errors("outbox_mark_delivered"):
            await self._session.execute(stmt)

    async def mark_failed(self, entry_id: int, error: str) -> None:
        stmt = (
            update(OutboxEventModel)
            .where(OutboxEventModel.id == entry_id)
            .values(
                attempts=OutboxEventModel.attempts + 1,
                last_error=error[:MAX_ERROR_LENGTH],
            )
        )
        with translate_store_errors("outbox_mark_failed"):
            await self._session.execute(stmt)

    async def count_pending(self) -> int:
        stmt = (
            select(func.count())
            .select_from(OutboxEventModel)
            .where(OutboxEventModel.delivered_at.is_(None))
        )
        with translate_store_errors("outbox_count_pending"):
            result = await self._session.execute(stmt)
            return result.scalar_one()

    def _map_to_entry(self, model: OutboxEventModel) -> OutboxEntry:
        return OutboxEntry(
            id=model.id,
            routing_key=model.routing_key,
            event=UserEvent.from_dict(model.payload),
            created_at=ensure_tz_aware(model.created_at),
            attempts=model.attempts,
            last_error=model.last_error,
        )

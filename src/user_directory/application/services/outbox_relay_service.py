"""Relay delivering outbox entries to the event channel.

Runs outside the request path. Each entry is delivered with an awaited
``send`` and marked delivered only after the broker acknowledged it, so
delivery is at-least-once: a crash between acknowledgement and the commit
of ``mark_delivered`` re-sends that entry on the next run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from user_directory.application.ports import EventPublishError

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from user_directory.application.ports import EventPublisher, OutboxRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayResult:
    """Outcome of one relay pass."""

    delivered: int = 0
    failed: int = 0

    @property
    def processed(self) -> int:
        return self.delivered + self.failed


class OutboxRelayService:
    """Deliver pending outbox entries and record the outcome."""

    DEFAULT_BATCH_SIZE = 100
    DEFAULT_MAX_ATTEMPTS = 10

    def __init__(
        self,
        outbox_repository: OutboxRepository,
        event_publisher: EventPublisher,
        db_session: Optional[AsyncSession] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self._outbox_repo = outbox_repository
        self._publisher = event_publisher
        self._db_session = db_session
        self._max_attempts = max_attempts

    async def relay_pending(self, batch_size: int = DEFAULT_BATCH_SIZE) -> RelayResult:
        entries = await self._outbox_repo.list_pending(
            limit=batch_size,
            max_attempts=self._max_attempts,
        )
        if not entries:
            return RelayResult()

        delivered = 0
        failed = 0
        for entry in entries:
            try:
                await self._publisher.send(entry.routing_key, entry.event)
            except EventPublishError as e:
                failed += 1
                await self._outbox_repo.mark_failed(entry.id, e.message)
                logger.warning(
                    "Outbox entry %s delivery failed (attempt %d): %s",
                    entry.id,
                    entry.attempts + 1,
                    e.message,
                )
            else:
                delivered += 1
                await self._outbox_repo.mark_delivered(entry.id)
            # Commit per entry so an acknowledged event is not re-sent
            # because a later entry failed.
            if self._db_session is not None:
                await self._db_session.commit()

        logger.info("Outbox relay: %d delivered, %d failed", delivered, failed)
        return RelayResult(delivered=delivered, failed=failed)

    async def count_pending(self) -> int:
        return await self._outbox_repo.count_pending()

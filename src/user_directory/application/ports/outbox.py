"""Outbox port for durable event hand-off.

Events recorded here share the unit of work of the record mutation that
produced them; a separate relay delivers them to the event channel.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from user_directory.domain.events import UserEvent


@dataclass(frozen=True)
class OutboxEntry:
    """A stored, not yet delivered event."""

    id: int
    routing_key: str
    event: UserEvent
    created_at: datetime
    attempts: int = 0
    last_error: Optional[str] = None


class OutboxRepository(ABC):
    """Repository interface for outbox entries."""

    @abstractmethod
    async def add(self, routing_key: str, event: UserEvent) -> None:
        """Record an event in the current unit of work."""

    @abstractmethod
    async def list_pending(self, limit: int, max_attempts: int) -> list[OutboxEntry]:
        """Undelivered entries below ``max_attempts``, oldest first."""

    @abstractmethod
    async def mark_delivered(self, entry_id: int) -> None:
        """Flag an entry as delivered so it is never relayed again."""

    @abstractmethod
    async def mark_failed(self, entry_id: int, error: str) -> None:
        """Count a failed delivery attempt and keep the error."""

    @abstractmethod
    async def count_pending(self) -> int:
        """Number of undelivered entries."""

from user_directory.application.ports.event_publisher import (
    EventPublisher,
    EventPublishError,
)
from user_directory.application.ports.outbox import OutboxEntry, OutboxRepository

__all__ = [
    "EventPublishError",
    "EventPublisher",
    "OutboxEntry",
    "OutboxRepository",
]

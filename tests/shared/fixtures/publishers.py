"""Event publisher test doubles."""

from user_directory.application.ports import EventPublisher, EventPublishError
from user_directory.domain.events import UserEvent


class RecordingEventPublisher(EventPublisher):
    """Keeps every published event in memory, in publication order."""

    def __init__(self) -> None:
        self.published: list[tuple[str, UserEvent]] = []
        self.sent: list[tuple[str, UserEvent]] = []
        self.closed = False

    async def publish(self, routing_key: str, event: UserEvent) -> None:
        self.published.append((routing_key, event))

    async def send(self, routing_key: str, event: UserEvent) -> None:
        self.sent.append((routing_key, event))

    async def close(self) -> None:
        self.closed = True

    @property
    def keys(self) -> list[str]:
        return [key for key, _ in self.published]


class FailingEventPublisher(EventPublisher):
    """Raises on every call, like an unreachable broker."""

    def __init__(self, message: str = "broker unavailable") -> None:
        self.message = message
        self.attempts = 0

    async def publish(self, routing_key: str, event: UserEvent) -> None:
        self.attempts += 1
        raise EventPublishError(self.message)

    async def send(self, routing_key: str, event: UserEvent) -> None:
        self.attempts += 1
        raise EventPublishError(self.message)

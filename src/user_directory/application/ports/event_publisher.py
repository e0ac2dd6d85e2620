"""Event publisher port for the application layer.

This abstracts the event channel, allowing the lifecycle service to remain
independent of the broker, its client library and its wire protocol.
"""

from abc import ABC, abstractmethod
from typing import Any

from user_directory.domain.events import UserEvent
from user_directory.domain.shared.exceptions import DomainException, ErrorCode


class EventPublishError(DomainException):
    """Raised when the event channel does not acknowledge an event."""

    def __init__(
        self,
        message: str = "Failed to publish event",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.EVENT_PUBLISH_FAILED, details)


class EventPublisher(ABC):
    """Port for handing domain events to an external event channel."""

    @abstractmethod
    async def publish(self, routing_key: str, event: UserEvent) -> None:
        """Fire-and-forget publication.

        Returns without waiting for broker acknowledgement. Delivery
        failures are reported through logging only.
        """

    @abstractmethod
    async def send(self, routing_key: str, event: UserEvent) -> None:
        """Publish and wait for the broker to acknowledge.

        Raises
        ------
        EventPublishError
            If the event was not acknowledged.
        """

    async def close(self) -> None:  # noqa: B027
        """Release connections and wait for in-flight publications."""

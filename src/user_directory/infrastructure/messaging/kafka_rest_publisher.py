"""Event publisher backed by a Kafka REST Proxy."""

from __future__ import annotations

import asyncio
import logging
from typing import Set

import httpx

from user_directory.application.ports import EventPublisher, EventPublishError
from user_directory.domain.events import UserEvent

logger = logging.getLogger(__name__)

KAFKA_JSON_CONTENT_TYPE = "application/vnd.kafka.json.v2+json"
KAFKA_ACCEPT = "application/vnd.kafka.v2+json, application/json"


class KafkaRestProxyPublisher(EventPublisher):
    """Publishes user events to a topic through the Kafka REST Proxy v2 API.

    The routing key becomes the Kafka record key, so all events for one
    email land on the same partition and keep their relative order.
    """

    def __init__(
        self,
        base_url: str,
        topic: str,
        timeout: float = 10.0,
        enabled: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._topic = topic
        self._timeout = timeout
        self._enabled = enabled
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        # Store references to fire-and-forget tasks to prevent garbage collection
        self._background_tasks: Set[asyncio.Task] = set()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def topic(self) -> str:
        return self._topic

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={
                    "Content-Type": KAFKA_JSON_CONTENT_TYPE,
                    "Accept": KAFKA_ACCEPT,
                },
                transport=self._transport,
            )
        return self._client

    async def publish(self, routing_key: str, event: UserEvent) -> None:
        if not self._enabled:
            logger.debug(
                "Event publishing disabled, dropped %s for %s",
                event.operation.value,
                routing_key,
            )
            return

        async def _send() -> None:
            try:
                await self.send(routing_key, event)
            except EventPublishError as e:
                logger.warning(
                    "Fire-and-forget publish of %s for %s failed: %s",
                    event.operation.value,
                    routing_key,
                    e.message,
                )

        task = asyncio.create_task(_send())
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

    async def send(self, routing_key: str, event: UserEvent) -> None:
        if not self._enabled:
            logger.debug("Event publishing disabled, skipped send for %s", routing_key)
            return

        body = {"records": [{"key": routing_key, "value": event.to_dict()}]}
        try:
            client = await self._get_client()
            response = await client.post(f"/topics/{self._topic}", json=body)
            response.raise_for_status()
        except httpx.ConnectError as e:
            msg = f"Kafka REST proxy connection failed: {e}"
            raise EventPublishError(msg, {"topic": self._topic}) from e
        except httpx.TimeoutException as e:
            msg = f"Kafka REST proxy timeout: {e}"
            raise EventPublishError(msg, {"topic": self._topic}) from e
        except httpx.HTTPStatusError as e:
            msg = (
                f"Kafka REST proxy returned {e.response.status_code}: "
                f"{e.response.text[:200] if e.response.text else 'no body'}"
            )
            raise EventPublishError(msg, {"topic": self._topic}) from e
        except httpx.HTTPError as e:
            msg = f"Kafka REST proxy request failed: {e}"
            raise EventPublishError(msg, {"topic": self._topic}) from e

        self._raise_for_record_errors(response)
        logger.debug(
            "Published %s event for %s to %s",
            event.operation.value,
            routing_key,
            self._topic,
        )

    def _raise_for_record_errors(self, response: httpx.Response) -> None:
        try:
            payload = response.json()
        except ValueError:
            return
        if not isinstance(payload, dict):
            return

        offsets = payload.get("offsets") or []
        for offset in offsets:
            if offset.get("error_code") or offset.get("error"):
                msg = (
                    f"Kafka rejected record (code={offset.get('error_code')}): "
                    f"{offset.get('error')}"
                )
                raise EventPublishError(msg, {"topic": self._topic})

    async def close(self) -> None:
        if self._background_tasks:
            await asyncio.gather(*self._background_tasks, return_exceptions=True)
        if self._client is not None:
            await self._client.aclose()
            self._client = None

"""Unit tests for KafkaRestProxyPublisher."""

import json

import httpx
import pytest

from user_directory.application.ports import EventPublishError
from user_directory.domain.events import UserEvent
from user_directory.infrastructure.messaging import KafkaRestProxyPublisher

BASE_URL = "http://kafka-rest:8082"
TOPIC = "user-events"


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        json={"offsets": [{"partition": 0, "offset": 1}]},
        request=request,
    )


class RecordingHandler:
    def __init__(self, responder=_ok):
        self.requests: list[httpx.Request] = []
        self._responder = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)


def _publisher(handler, **kwargs) -> KafkaRestProxyPublisher:
    return KafkaRestProxyPublisher(
        base_url=BASE_URL,
        topic=TOPIC,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestKafkaRestProxyPublisherSend:
    @pytest.mark.asyncio
    async def test_send_posts_record_keyed_by_email(self):
        handler = RecordingHandler()
        publisher = _publisher(handler)

        await publisher.send("ann@x.io", UserEvent.created("ann@x.io"))
        await publisher.close()

        assert len(handler.requests) == 1
        request = handler.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/topics/{TOPIC}"
        assert request.headers["content-type"] == "application/vnd.kafka.json.v2+json"
        assert json.loads(request.content) == {
            "records": [
                {
                    "key": "ann@x.io",
                    "value": {"email": "ann@x.io", "operation": "CREATE"},
                }
            ]
        }

    @pytest.mark.asyncio
    async def test_send_raises_on_http_error_status(self):
        def _unavailable(request):
            return httpx.Response(503, text="unavailable", request=request)

        publisher = _publisher(RecordingHandler(_unavailable))

        with pytest.raises(EventPublishError) as exc_info:
            await publisher.send("ann@x.io", UserEvent.created("ann@x.io"))
        await publisher.close()

        assert "503" in exc_info.value.message
        assert exc_info.value.details == {"topic": TOPIC}

    @pytest.mark.asyncio
    async def test_send_raises_on_connection_failure(self):
        def _refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        publisher = _publisher(_refuse)

        with pytest.raises(EventPublishError, match="connection failed"):
            await publisher.send("ann@x.io", UserEvent.deleted("ann@x.io"))
        await publisher.close()

    @pytest.mark.asyncio
    async def test_send_raises_on_timeout(self):
        def _timeout(request):
            raise httpx.ReadTimeout("timed out", request=request)

        publisher = _publisher(_timeout)

        with pytest.raises(EventPublishError, match="timeout"):
            await publisher.send("ann@x.io", UserEvent.created("ann@x.io"))
        await publisher.close()

    @pytest.mark.asyncio
    async def test_send_raises_on_rejected_record(self):
        def _rejected(request):
            return httpx.Response(
                200,
                json={"offsets": [{"error_code": 50002, "error": "record too large"}]},
                request=request,
            )

        publisher = _publisher(_rejected)

        with pytest.raises(EventPublishError, match="record too large"):
            await publisher.send("ann@x.io", UserEvent.created("ann@x.io"))
        await publisher.close()

    @pytest.mark.asyncio
    async def test_disabled_publisher_sends_nothing(self):
        handler = RecordingHandler()
        publisher = _publisher(handler, enabled=False)

        await publisher.send("ann@x.io", UserEvent.created("ann@x.io"))
        await publisher.publish("ann@x.io", UserEvent.created("ann@x.io"))
        await publisher.close()

        assert handler.requests == []


class TestKafkaRestProxyPublisherPublish:
    @pytest.mark.asyncio
    async def test_publish_is_delivered_by_close(self):
        handler = RecordingHandler()
        publisher = _publisher(handler)

        await publisher.publish("ann@x.io", UserEvent.created("ann@x.io"))
        await publisher.publish("ann@x.io", UserEvent.deleted("ann@x.io"))
        await publisher.close()

        operations = [
            json.loads(r.content)["records"][0]["value"]["operation"]
            for r in handler.requests
        ]
        assert sorted(operations) == ["CREATE", "DELETE"]

    @pytest.mark.asyncio
    async def test_publish_swallows_delivery_failure(self, caplog):
        def _refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        publisher = _publisher(_refuse)

        await publisher.publish("ann@x.io", UserEvent.created("ann@x.io"))
        await publisher.close()

        assert "Fire-and-forget publish of CREATE for ann@x.io failed" in caplog.text

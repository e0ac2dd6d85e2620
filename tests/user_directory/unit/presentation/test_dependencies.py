"""Unit tests for API dependency wiring."""

from unittest.mock import AsyncMock

from user_directory.infrastructure.messaging import KafkaRestProxyPublisher
from user_directory.infrastructure.persistence.sqlalchemy import (
    OutboxRepositorySQLAlchemy,
)
from user_directory.presentation.api.dependencies import (
    build_event_publisher,
    get_user_service,
)
from user_directory_config import Settings


class TestDependencies:
    def test_build_event_publisher_uses_settings(self):
        settings = Settings(
            kafka_rest_url="http://proxy:8082/",
            kafka_topic="directory-events",
            events_enabled=False,
        )

        publisher = build_event_publisher(settings)

        assert isinstance(publisher, KafkaRestProxyPublisher)
        assert publisher.topic == "directory-events"
        assert publisher.enabled is False

    def test_direct_delivery_has_no_outbox(self):
        service = get_user_service(
            session=AsyncMock(),
            publisher=AsyncMock(),
            settings=Settings(event_delivery="direct"),
        )

        assert service._outbox_repo is None

    def test_outbox_delivery_wires_outbox_repository(self):
        service = get_user_service(
            session=AsyncMock(),
            publisher=AsyncMock(),
            settings=Settings(event_delivery="outbox"),
        )

        assert isinstance(service._outbox_repo, OutboxRepositorySQLAlchemy)

from user_directory.infrastructure.messaging.kafka_rest_publisher import (
    KafkaRestProxyPublisher,
)

__all__ = ["KafkaRestProxyPublisher"]

from user_directory.application.services.outbox_relay_service import (
    OutboxRelayService,
    RelayResult,
)
from user_directory.application.services.user_service import UserService

__all__ = [
    "OutboxRelayService",
    "RelayResult",
    "UserService",
]

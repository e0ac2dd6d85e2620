"""User Directory - user records with lifecycle event notifications.

This package handles:
- User records (create, read, update, delete) with unique emails
- CREATE/DELETE notifications to an external event channel
- A transactional outbox as the durable alternative to direct publishing
"""

from user_directory.application.dtos import UserUpdate, UserView
from user_directory.application.ports import (
    EventPublisher,
    EventPublishError,
    OutboxRepository,
)
from user_directory.application.services import OutboxRelayService, UserService
from user_directory.domain.events import Operation, UserEvent
from user_directory.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from user_directory.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserDataError,
    User,
    UserNotFoundByEmailError,
    UserNotFoundError,
    UserRepository,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserDataError",
    "User",
    "UserNotFoundByEmailError",
    "UserNotFoundError",
    "UserRepository",
    # Domain - Events
    "Operation",
    "UserEvent",
    # Exceptions
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "StorageError",
    "ValidationError",
    # Ports
    "EventPublishError",
    "EventPublisher",
    "OutboxRepository",
    # Application
    "OutboxRelayService",
    "UserService",
    "UserUpdate",
    "UserView",
]

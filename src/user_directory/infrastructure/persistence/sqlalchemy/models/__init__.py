"""SQLAlchemy models for the user directory."""

from user_directory.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)
from user_directory.infrastructure.persistence.sqlalchemy.models.outbox_event_model import (  # noqa: E501
    OutboxEventModel,
)
from user_directory.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "OutboxEventModel",
    "UserModel",
]

from user_directory.infrastructure.persistence.sqlalchemy.repositories.outbox_repository import (  # noqa: E501
    OutboxRepositorySQLAlchemy,
)
from user_directory.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "OutboxRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]

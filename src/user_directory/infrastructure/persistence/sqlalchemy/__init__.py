"""SQLAlchemy implementation for user directory persistence.

Provides:
- Base: Declarative base for all models
- UserModel / OutboxEventModel: table mappings
- UserRepositorySQLAlchemy / OutboxRepositorySQLAlchemy: repository implementations
"""

from user_directory.infrastructure.persistence.sqlalchemy.models import (
    Base,
    OutboxEventModel,
    UserModel,
)
from user_directory.infrastructure.persistence.sqlalchemy.repositories import (
    OutboxRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "OutboxEventModel",
    "OutboxRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]

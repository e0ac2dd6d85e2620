from user_directory.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    StorageError,
    ValidationError,
)
from user_directory.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "StorageError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]

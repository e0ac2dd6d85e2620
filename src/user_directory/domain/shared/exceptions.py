"""Error codes and the base exception hierarchy.

Every error the domain and application layers raise derives from
``DomainException``; the HTTP layer maps ``code`` to a status in one place.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Machine-readable codes returned to API clients. Values are stable."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"

    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    STORAGE_FAILURE = "STORAGE_FAILURE"
    EVENT_PUBLISH_FAILED = "EVENT_PUBLISH_FAILED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class for user directory errors.

    Attributes
    ----------
    message
        Text safe to show to API clients
    code
        ``ErrorCode`` for programmatic handling
    details
        Extra context for logs; never sent to clients
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR
    default_message: ClassVar[str] = "Internal error"

    def __init__(
        self,
        message: str | None = None,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input rejected by a domain rule."""

    default_code = ErrorCode.VALIDATION_ERROR
    default_message = "Invalid input"


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND
    default_message = "Entity not found"


class ConflictError(DomainException):
    """The change clashes with data already stored."""

    default_code = ErrorCode.CONFLICT
    default_message = "Conflicting state"


class StorageError(DomainException):
    """The record store failed for a reason no other error describes.

    Not retried: the operation that hit it is reported as failed.
    """

    default_code = ErrorCode.STORAGE_FAILURE
    default_message = "The record store failed to complete the operation"

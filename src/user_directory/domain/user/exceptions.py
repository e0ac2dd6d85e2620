"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from user_directory.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class InvalidUserDataError(ValidationError):
    """Raised when a user attribute violates its constraints."""

    def __init__(self, message: str, field: str) -> None:
        self.field = field
        super().__init__(message, details={"field": field})


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"User with email {email} already exists",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class UserNotFoundByEmailError(EntityNotFoundError):
    """No user registered under the given email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"User not found with email: {email}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"email": email},
        )

"""User domain manages directory records.

This domain handles:
- User aggregate (id, name, email, age, created_at)
- Email uniqueness rules
- Repository interface, implemented in infrastructure
"""

from user_directory.domain.user.aggregates import User
from user_directory.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserDataError,
    UserNotFoundByEmailError,
    UserNotFoundError,
)
from user_directory.domain.user.repositories import UserRepository
from user_directory.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserDataError",
    "User",
    "UserNotFoundByEmailError",
    "UserNotFoundError",
    "UserRepository",
]

"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from user_directory.domain.user.aggregates.user import User
from user_directory.domain.user.value_objects import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations enforce email uniqueness with a store-level constraint
    and raise ``EmailAlreadyExistsError`` when a write violates it. Other
    store failures surface as ``StorageError``.
    """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def find_all(self) -> list[User]:
        """List all users, oldest first."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert the user if it has no ID, otherwise update it.

        Returns the persisted user, carrying the store-assigned ID.
        """

    @abstractmethod
    async def delete_by_id(self, user_id: int) -> None:
        """Delete a user by ID. Deleting an unknown ID is a no-op."""

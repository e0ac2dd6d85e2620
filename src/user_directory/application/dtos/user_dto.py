"""DTOs for user lifecycle operations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from user_directory.domain.user import User


@dataclass(frozen=True)
class UserView:
    """Read-only projection of a stored user."""

    id: int
    name: str
    email: str
    age: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        if user.id is None:
            msg = "Cannot build a view of a user that was never persisted"
            raise ValueError(msg)
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            age=user.age,
            created_at=user.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class UserUpdate:
    """Fields to change on an existing user.

    Only fields that are set (not None) are applied; omitted fields keep
    their stored value. ``created_at`` is never updatable.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.email is None and self.age is None

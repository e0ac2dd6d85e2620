from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, PositiveInt

from user_directory.application.dtos import UserUpdate, UserView


class CreateUserRequest(BaseModel):
    """Request schema for creating a new user."""

    name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    age: PositiveInt


class UpdateUserRequest(BaseModel):
    """Request schema for a partial user update.

    Omitted fields keep their stored value.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    age: Optional[PositiveInt] = None

    def to_update(self) -> UserUpdate:
        return UserUpdate(
            name=self.name,
            email=str(self.email) if self.email is not None else None,
            age=self.age,
        )


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: int
    name: str
    email: str
    age: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_view(cls, view: UserView) -> "UserResponse":
        return cls.model_validate(view)

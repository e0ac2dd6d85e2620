from user_directory.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
]

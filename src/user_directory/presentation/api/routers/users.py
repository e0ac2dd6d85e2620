import logging

from fastapi import APIRouter, Response, status

from user_directory.presentation.api.dependencies import UserServiceDep
from user_directory.presentation.api.schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={
        201: {"description": "User created successfully"},
        409: {"description": "Email already registered"},
    },
)
async def create_user(
    request: CreateUserRequest,
    service: UserServiceDep,
) -> UserResponse:
    """Create a new user and announce it on the event channel."""
    view = await service.create(
        name=request.name,
        email=str(request.email),
        age=request.age,
    )
    return UserResponse.from_view(view)


@router.get("", summary="List all users")
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    views = await service.get_all()
    return [UserResponse.from_view(view) for view in views]


@router.get(
    "/by-email/{email}",
    summary="Get a user by email address",
    responses={404: {"description": "No user with this email"}},
)
async def get_user_by_email(email: str, service: UserServiceDep) -> UserResponse:
    return UserResponse.from_view(await service.get_by_email(email))


@router.get(
    "/{user_id}",
    summary="Get a user by ID",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: int, service: UserServiceDep) -> UserResponse:
    return UserResponse.from_view(await service.get_by_id(user_id))


@router.patch(
    "/{user_id}",
    summary="Update a user",
    responses={
        404: {"description": "User not found"},
        409: {"description": "Email already registered"},
    },
)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: UserServiceDep,
) -> UserResponse:
    """Apply the supplied fields; omitted fields are left unchanged."""
    view = await service.update(user_id, request.to_update())
    return UserResponse.from_view(view)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={204: {"description": "User deleted (or did not exist)"}},
)
async def delete_user(user_id: int, service: UserServiceDep) -> Response:
    await service.delete_by_id(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

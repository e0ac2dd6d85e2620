"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from user_directory.domain.shared.time import ensure_tz_aware
from user_directory.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from user_directory.infrastructure.persistence.sqlalchemy.models import UserModel
from user_directory.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
    translate_store_errors,
)

logger = logging.getLogger(__name__)


def _email_value(email: Union[str, Email]) -> str:
    return email.value if isinstance(email, Email) else email.strip()


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == _email_value(email))
        with translate_store_errors("exists_by_email"):
            result = await self._session.execute(stmt)
            return result.first() is not None

    async def find_by_id(self, user_id: int) -> User | None:
        with translate_store_errors("find_by_id"):
            model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        stmt = select(UserModel).where(UserModel.email == _email_value(email))
        with translate_store_errors("find_by_email"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.id)
        with translate_store_errors("find_all"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def save(self, user: User) -> User:
        with translate_store_errors("save"):
            if user.id is None:
                model = self._map_to_model(user)
                self._session.add(model)
            else:
                model = await self._find_model_by_id(user.id)
                if model is None:
                    raise UserNotFoundError(user.id)
                self._update_model(model, user)

            try:
                await self._session.flush()
            except IntegrityError as e:
                if is_unique_violation(e):
                    logger.warning("Store rejected duplicate email: %s", user.email)
                    raise EmailAlreadyExistsError(user.email) from e
                raise

        if user.id is None:
            logger.debug("Inserted user: %s (email: %s)", model.id, model.email)
        else:
            logger.debug("Updated user: %s", model.id)
        return self._map_to_domain(model)

    async def delete_by_id(self, user_id: int) -> None:
        stmt = delete(UserModel).where(UserModel.id == user_id)
        with translate_store_errors("delete_by_id"):
            result = await self._session.execute(stmt)
        if result.rowcount:
            logger.debug("Deleted user: %s", user_id)

    async def _find_model_by_id(self, user_id: int) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            age=model.age,
            created_at=ensure_tz_aware(model.created_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            name=user.name,
            email=user.email,
            age=user.age,
            created_at=user.created_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.age = user.age

"""Application service orchestrating the user lifecycle.

Responsibilities:
1. Enforce email uniqueness (pre-check, with the store constraint as the
   final arbiter under concurrent writers)
2. Scope every mutation to a single unit of work
3. Emit CREATE/DELETE events after the mutation commits

Event emission is best-effort: a failing event channel never fails or rolls
back a committed mutation. When an outbox repository is configured, events
are recorded inside the mutation's unit of work instead and delivered later
by the outbox relay.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, TypeVar

from user_directory.application.dtos import UserUpdate, UserView
from user_directory.domain.events import UserEvent
from user_directory.domain.shared.exceptions import DomainException, StorageError
from user_directory.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundByEmailError,
    UserNotFoundError,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from user_directory.application.ports import EventPublisher, OutboxRepository
    from user_directory.domain.user import UserRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UserService:
    """Create, read, update and delete directory users."""

    def __init__(
        self,
        user_repository: UserRepository,
        event_publisher: EventPublisher,
        outbox_repository: Optional[OutboxRepository] = None,
        db_session: Optional[AsyncSession] = None,
    ):
        self._user_repo = user_repository
        self._publisher = event_publisher
        self._outbox_repo = outbox_repository
        self._db_session = db_session

    async def create(self, name: str, email: str, age: int) -> UserView:
        user = User.create(name=name, email=email, age=age)

        if await self._user_repo.exists_by_email(user.email_obj):
            logger.info("Rejected create, email already registered: %s", user.email)
            raise EmailAlreadyExistsError(user.email)

        async def _persist() -> User:
            saved = await self._user_repo.save(user)
            await self._record(UserEvent.created(saved.email))
            return saved

        saved = await self._run_in_unit_of_work(_persist)
        logger.info("Created user %s (email: %s)", saved.id, saved.email)

        await self._emit(UserEvent.created(saved.email))
        return UserView.from_user(saved)

    async def get_by_id(self, user_id: int) -> UserView:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserView.from_user(user)

    async def get_by_email(self, email: str) -> UserView:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundByEmailError(email)
        return UserView.from_user(user)

    async def get_all(self) -> list[UserView]:
        users = await self._user_repo.find_all()
        return [UserView.from_user(user) for user in users]

    async def update(self, user_id: int, changes: UserUpdate) -> UserView:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if changes.name is not None:
            user.rename(changes.name)
        if changes.age is not None:
            user.change_age(changes.age)
        if changes.email is not None:
            new_email = Email(changes.email)
            if new_email.value != user.email and await self._user_repo.exists_by_email(
                new_email
            ):
                raise EmailAlreadyExistsError(new_email.value)
            user.change_email(new_email)

        saved = await self._run_in_unit_of_work(lambda: self._user_repo.save(user))
        logger.debug("Updated user %s", saved.id)
        return UserView.from_user(saved)

    async def delete_by_id(self, user_id: int) -> None:
        # Looked up first so the DELETE event can carry the email.
        user = await self._user_repo.find_by_id(user_id)

        async def _delete() -> None:
            await self._user_repo.delete_by_id(user_id)
            if user is not None:
                await self._record(UserEvent.deleted(user.email))

        await self._run_in_unit_of_work(_delete)

        if user is None:
            logger.debug("Delete of unknown user %s, nothing to notify", user_id)
            return

        logger.info("Deleted user %s (email: %s)", user_id, user.email)
        await self._emit(UserEvent.deleted(user.email))

    async def _run_in_unit_of_work(self, fn: Callable[[], Awaitable[T]]) -> T:
        if self._db_session is None:
            return await fn()

        try:
            result = await fn()
            await self._db_session.commit()
        except DomainException:
            await self._db_session.rollback()
            raise
        except Exception as e:
            await self._db_session.rollback()
            logger.error("Unit of work failed (%s): %s", type(e).__name__, e)
            raise StorageError(details={"error": type(e).__name__}) from e
        return result

    async def _record(self, event: UserEvent) -> None:
        if self._outbox_repo is not None:
            await self._outbox_repo.add(event.routing_key, event)

    async def _emit(self, event: UserEvent) -> None:
        if self._outbox_repo is not None:
            # Already recorded in the outbox; the relay delivers it.
            return

        try:
            await self._publisher.publish(event.routing_key, event)
        except Exception as e:
            logger.error(
                "Failed to publish %s event for %s: %s",
                event.operation.value,
                event.email,
                e,
            )
            # Don't raise - the mutation is already committed

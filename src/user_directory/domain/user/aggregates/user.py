"""User aggregate for the user directory."""

from datetime import datetime
from typing import Optional, Union

from user_directory.domain.shared.time import utc_now
from user_directory.domain.user.exceptions import InvalidUserDataError
from user_directory.domain.user.value_objects import Email

MAX_NAME_LENGTH = 50


def _validate_name(name: str) -> str:
    if name is None or not name.strip():
        msg = "Name cannot be blank"
        raise InvalidUserDataError(msg, field="name")
    if len(name) > MAX_NAME_LENGTH:
        msg = f"Name must be at most {MAX_NAME_LENGTH} characters"
        raise InvalidUserDataError(msg, field="name")
    return name


def _validate_age(age: int) -> int:
    if isinstance(age, bool) or not isinstance(age, int) or age <= 0:
        msg = "Age must be a positive integer"
        raise InvalidUserDataError(msg, field="age")
    return age


class User:
    """
    User aggregate root.

    The identifier is assigned by the record store on first save and never
    changes afterwards. ``created_at`` is set once, at creation.
    """

    def __init__(
        self,
        name: str,
        email: Union[str, Email],
        age: int,
        id: Optional[int] = None,
        created_at: datetime | None = None,
    ):
        self._id = id
        self._name = _validate_name(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._age = _validate_age(age)
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def age(self) -> int:
        return self._age

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def rename(self, name: str) -> None:
        self._name = _validate_name(name)

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)

    def change_age(self, age: int) -> None:
        self._age = _validate_age(age)

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        age: int,
    ) -> "User":
        return cls(name=name, email=email, age=age)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        email: Union[str, Email],
        age: int,
        created_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            age=age,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"

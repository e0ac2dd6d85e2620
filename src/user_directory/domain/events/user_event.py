"""Domain events emitted around the user lifecycle."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Operation(str, Enum):
    """Lifecycle change carried by a UserEvent."""

    CREATE = "CREATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class UserEvent:
    """Notification that a user was created or deleted.

    Transient: the lifecycle service builds one and hands it to the event
    channel. The subject email doubles as the routing key.
    """

    email: str
    operation: Operation

    @property
    def routing_key(self) -> str:
        return self.email

    @classmethod
    def created(cls, email: str) -> "UserEvent":
        return cls(email=email, operation=Operation.CREATE)

    @classmethod
    def deleted(cls, email: str) -> "UserEvent":
        return cls(email=email, operation=Operation.DELETE)

    def to_dict(self) -> dict[str, Any]:
        return {"email": self.email, "operation": self.operation.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserEvent":
        return cls(email=data["email"], operation=Operation(data["operation"]))

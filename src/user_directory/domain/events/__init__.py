from user_directory.domain.events.user_event import Operation, UserEvent

__all__ = ["Operation", "UserEvent"]

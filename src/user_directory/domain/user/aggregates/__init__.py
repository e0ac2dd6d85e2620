from user_directory.domain.user.aggregates.user import User

__all__ = ["User"]

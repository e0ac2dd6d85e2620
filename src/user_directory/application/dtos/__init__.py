from user_directory.application.dtos.user_dto import UserUpdate, UserView

__all__ = ["UserUpdate", "UserView"]

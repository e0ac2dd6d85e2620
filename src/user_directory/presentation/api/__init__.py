"""HTTP adapter for the user directory."""

from user_directory.presentation.api.app import API_V1_PREFIX, create_app

__all__ = ["API_V1_PREFIX", "create_app"]

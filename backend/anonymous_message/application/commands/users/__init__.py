"""User profile commands."""

from .update_user_profile import UpdateUserProfileCommand, UpdateUserProfileHandler

__all__ = [
    "UpdateUserProfileCommand",
    "UpdateUserProfileHandler",
]

"""
User profile errors.
"""

from enum import Enum

from anonymous_message.domain.exceptions.domain_error import DomainError


class UpdateUserProfileErrorKind(str, Enum):
    EMPTY_USERNAME = "empty_username"
    USERNAME_TOO_SHORT = "username_too_short"
    USERNAME_TOO_LONG = "username_too_long"


class UpdateUserProfileError(DomainError):
    messages = {
        UpdateUserProfileErrorKind.EMPTY_USERNAME: "Please enter a username.",
        UpdateUserProfileErrorKind.USERNAME_TOO_SHORT: "Username must be at least 2 characters.",
        UpdateUserProfileErrorKind.USERNAME_TOO_LONG: "Username can be at most 20 characters.",
    }

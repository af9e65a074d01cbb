"""User profile queries."""

from anonymous_message.application.queries.users.fetch_user_profile import (
    FetchUserProfileHandler,
    FetchUserProfileQuery,
)

__all__ = [
    "FetchUserProfileQuery",
    "FetchUserProfileHandler",
]

"""
User Entity - An application user.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from anonymous_message.domain.value_objects.personal_link import PersonalLink
from anonymous_message.domain.value_objects.user_email import UserEmail
from anonymous_message.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    username: str
    email: UserEmail
    personal_link: PersonalLink
    created_at: datetime
    # Optional fields (with defaults) - must come last
    profile_image_url: Optional[str] = None

    def __post_init__(self):
        if self.personal_link.user_id != self.id:
            raise ValueError(
                f"Personal link belongs to {self.personal_link.user_id}, not {self.id}"
            )

    @property
    def display_name(self) -> str:
        return self.username

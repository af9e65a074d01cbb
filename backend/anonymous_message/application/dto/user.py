"""User DTOs for the outer layer."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from anonymous_message.domain.entities.user import User


class UserDTO(BaseModel):
    id: str
    username: str
    email: str
    profile_image_url: Optional[str] = None
    personal_link_token: str
    personal_link_url: str
    share_text: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User, base_url: str) -> "UserDTO":
        """
        Args:
            base_url: PERSONAL_LINK_BASE_URL of the active config, usually
                ``(await container.get(Config)).PERSONAL_LINK_BASE_URL``
        """
        link = user.personal_link
        return cls(
            id=user.id.value,
            username=user.username,
            email=user.email.value,
            profile_image_url=user.profile_image_url,
            personal_link_token=link.token,
            personal_link_url=link.build_url(base_url),
            share_text=link.shareable_text(base_url),
            created_at=user.created_at,
        )

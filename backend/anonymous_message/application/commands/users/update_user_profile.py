"""
Update User Profile Command.

Only username and profile image can change. Id, email, personal link and
created_at always carry over from the stored user.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from anonymous_message.application.common.interfaces import Command, CommandHandler
from anonymous_message.application.common.patch import UNSET, Patchable, is_set, merge
from anonymous_message.application.common.validation import (
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    is_blank,
)
from anonymous_message.domain.entities.user import User
from anonymous_message.domain.exceptions import (
    UpdateUserProfileError,
    UpdateUserProfileErrorKind,
)
from anonymous_message.domain.ports.repositories import UserRepository
from anonymous_message.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateUserProfileCommand(Command[User]):
    user_id: UserId
    username: Patchable[str] = UNSET
    profile_image_url: Patchable[str] = UNSET


class UpdateUserProfileHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: UpdateUserProfileCommand) -> User:
        username = UNSET
        if is_set(command.username):
            username = self._validate_username(command.username)

        existing = await self._user_repository.fetch_user_by_id(command.user_id)

        updated = replace(
            existing,
            username=merge(username, existing.username),
            profile_image_url=merge(
                command.profile_image_url, existing.profile_image_url
            ),
        )
        saved = await self._user_repository.update_user(updated)
        logger.info(f"Profile of user {saved.id} updated")
        return saved

    async def update_username(self, user_id: UserId, username: str) -> User:
        return await self.execute(
            UpdateUserProfileCommand(user_id=user_id, username=username)
        )

    async def update_profile_image(
        self, user_id: UserId, profile_image_url: Optional[str]
    ) -> User:
        return await self.execute(
            UpdateUserProfileCommand(user_id=user_id, profile_image_url=profile_image_url)
        )

    def _validate_username(self, username: Optional[str]) -> str:
        if is_blank(username):
            raise UpdateUserProfileError(UpdateUserProfileErrorKind.EMPTY_USERNAME)
        trimmed = username.strip()
        if len(trimmed) < USERNAME_MIN_LENGTH:
            raise UpdateUserProfileError(UpdateUserProfileErrorKind.USERNAME_TOO_SHORT)
        if len(trimmed) > USERNAME_MAX_LENGTH:
            raise UpdateUserProfileError(UpdateUserProfileErrorKind.USERNAME_TOO_LONG)
        return trimmed

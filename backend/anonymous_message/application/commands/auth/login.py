"""Login Command."""

import logging
from dataclasses import dataclass, field

from anonymous_message.application.common.interfaces import Command, CommandHandler
from anonymous_message.application.common.validation import (
    LOGIN_PASSWORD_MIN_LENGTH,
    is_blank,
    is_valid_email,
)
from anonymous_message.domain.entities.user import User
from anonymous_message.domain.exceptions import LoginError, LoginErrorKind
from anonymous_message.domain.ports.repositories import AuthRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginCommand(Command[User]):
    email: str
    password: str = field(repr=False)


class LoginHandler(CommandHandler[User]):
    def __init__(self, auth_repository: AuthRepository):
        self._auth_repository = auth_repository

    async def execute(self, command: LoginCommand) -> User:
        self._validate(command)

        # Collaborator failures (INVALID_CREDENTIALS, USER_NOT_FOUND,
        # ACCOUNT_LOCKED) propagate as raised
        user = await self._auth_repository.login(command.email, command.password)
        logger.info(f"User {user.id} logged in")
        return user

    def _validate(self, command: LoginCommand) -> None:
        if is_blank(command.email):
            raise LoginError(LoginErrorKind.EMPTY_EMAIL)
        if not is_valid_email(command.email):
            raise LoginError(LoginErrorKind.INVALID_EMAIL_FORMAT)

        if not command.password:
            raise LoginError(LoginErrorKind.EMPTY_PASSWORD)
        if len(command.password) < LOGIN_PASSWORD_MIN_LENGTH:
            raise LoginError(LoginErrorKind.PASSWORD_TOO_SHORT)

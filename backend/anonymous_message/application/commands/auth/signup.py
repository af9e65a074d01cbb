"""
Signup Command.

Checks run in a fixed order and stop at the first failure:
username → email → password → confirmation. PASSWORD_MISMATCH is only
reported once the password itself is acceptable.
"""

import logging
from dataclasses import dataclass, field

from anonymous_message.application.common.interfaces import Command, CommandHandler
from anonymous_message.application.common.validation import (
    SIGNUP_PASSWORD_MAX_LENGTH,
    SIGNUP_PASSWORD_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    has_letter_and_digit,
    is_blank,
    is_valid_email,
)
from anonymous_message.domain.entities.user import User
from anonymous_message.domain.exceptions import SignupError, SignupErrorKind
from anonymous_message.domain.ports.repositories import AuthRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignupCommand(Command[User]):
    username: str
    email: str
    password: str = field(repr=False)
    password_confirmation: str = field(repr=False)


class SignupHandler(CommandHandler[User]):
    def __init__(self, auth_repository: AuthRepository):
        self._auth_repository = auth_repository

    async def execute(self, command: SignupCommand) -> User:
        self._validate(command)

        user = await self._auth_repository.signup(
            username=command.username,
            email=command.email,
            password=command.password,
        )
        logger.info(f"User {user.id} signed up")
        return user

    def _validate(self, command: SignupCommand) -> None:
        # Username
        if is_blank(command.username):
            raise SignupError(SignupErrorKind.EMPTY_USERNAME)
        # Blankness ignores padding, length counts it
        if len(command.username) < USERNAME_MIN_LENGTH:
            raise SignupError(SignupErrorKind.USERNAME_TOO_SHORT)
        if len(command.username) > USERNAME_MAX_LENGTH:
            raise SignupError(SignupErrorKind.USERNAME_TOO_LONG)

        # Email
        if is_blank(command.email):
            raise SignupError(SignupErrorKind.EMPTY_EMAIL)
        if not is_valid_email(command.email):
            raise SignupError(SignupErrorKind.INVALID_EMAIL_FORMAT)

        # Password
        password = command.password
        if not password:
            raise SignupError(SignupErrorKind.EMPTY_PASSWORD)
        if len(password) < SIGNUP_PASSWORD_MIN_LENGTH:
            raise SignupError(SignupErrorKind.PASSWORD_TOO_SHORT)
        if len(password) > SIGNUP_PASSWORD_MAX_LENGTH:
            raise SignupError(SignupErrorKind.PASSWORD_TOO_LONG)
        if not has_letter_and_digit(password):
            raise SignupError(SignupErrorKind.WEAK_PASSWORD)

        if password != command.password_confirmation:
            raise SignupError(SignupErrorKind.PASSWORD_MISMATCH)

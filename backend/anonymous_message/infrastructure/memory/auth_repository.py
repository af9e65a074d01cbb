"""
In-memory Auth Repository.

- signup: unique email (case-insensitive), PBKDF2 password hash, new
  PersonalLink, signs the user in
- login: USER_NOT_FOUND / INVALID_CREDENTIALS; after max_login_attempts
  consecutive failures the account is locked (ACCOUNT_LOCKED)
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from anonymous_message.domain.entities.user import User
from anonymous_message.domain.exceptions import (
    LoginError,
    LoginErrorKind,
    SignupError,
    SignupErrorKind,
)
from anonymous_message.domain.ports.repositories import AuthRepository
from anonymous_message.domain.value_objects.personal_link import PersonalLink
from anonymous_message.domain.value_objects.user_email import UserEmail
from anonymous_message.domain.value_objects.user_id import UserId
from anonymous_message.infrastructure.memory.user_store import InMemoryUserStore

logger = logging.getLogger(__name__)


class InMemoryAuthRepository(AuthRepository):
    _store: InMemoryUserStore

    def __init__(self, store: InMemoryUserStore, max_login_attempts: int = 5):
        self._store = store
        self._max_login_attempts = max_login_attempts

    async def login(self, email: str, password: str) -> User:
        async with self._store.lock:
            user = self._store.find_by_email(email)
            if user is None:
                raise LoginError(LoginErrorKind.USER_NOT_FOUND)

            credentials = self._store.credentials[user.id.value]
            if credentials.locked:
                raise LoginError(LoginErrorKind.ACCOUNT_LOCKED)

            if not self._store.check_password(credentials, password):
                credentials.failed_attempts += 1
                if credentials.failed_attempts >= self._max_login_attempts:
                    credentials.locked = True
                    logger.warning(f"Account {user.id} locked after failed logins")
                raise LoginError(LoginErrorKind.INVALID_CREDENTIALS)

            credentials.failed_attempts = 0
            self._store.current_user_id = user.id
            return user

    async def signup(self, username: str, email: str, password: str) -> User:
        async with self._store.lock:
            if self._store.find_by_email(email) is not None:
                raise SignupError(SignupErrorKind.EMAIL_ALREADY_EXISTS)

            user_id = UserId.generate()
            user = User(
                id=user_id,
                username=username,
                email=UserEmail(email),
                personal_link=self._unique_link(user_id),
                created_at=datetime.now(timezone.utc),
            )
            self._store.users[user_id.value] = user
            self._store.credentials[user_id.value] = self._store.make_credentials(
                password
            )
            self._store.current_user_id = user_id
            logger.debug(f"Stored new user {user_id}")
            return user

    async def logout(self) -> None:
        self._store.current_user_id = None

    async def get_current_user(self) -> Optional[User]:
        if self._store.current_user_id is None:
            return None
        return self._store.users.get(self._store.current_user_id.value)

    async def is_authenticated(self) -> bool:
        return self._store.current_user_id is not None

    def _unique_link(self, user_id: UserId) -> PersonalLink:
        link = PersonalLink.generate(user_id)
        while self._store.find_by_token(link.token) is not None:
            link = PersonalLink.generate(user_id)
        return link

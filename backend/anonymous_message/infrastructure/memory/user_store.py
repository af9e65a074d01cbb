"""
In-memory user table shared by the auth and user repositories.

Holds users, their password hashes, failed login counters and the id of the
signed-in user (one session per process, like a single device).
"""

import asyncio
import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass, field
from typing import Optional

from anonymous_message.domain.entities.user import User
from anonymous_message.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class Credentials:
    salt: bytes
    password_hash: bytes
    failed_attempts: int = 0
    locked: bool = False


@dataclass
class InMemoryUserStore:
    hash_iterations: int = 100_000
    users: dict[str, User] = field(default_factory=dict)
    credentials: dict[str, Credentials] = field(default_factory=dict)
    current_user_id: Optional[UserId] = None
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def hash_password(self, password: str, salt: bytes) -> bytes:
        return hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, self.hash_iterations
        )

    def make_credentials(self, password: str) -> Credentials:
        salt = secrets.token_bytes(16)
        return Credentials(salt=salt, password_hash=self.hash_password(password, salt))

    def check_password(self, credentials: Credentials, password: str) -> bool:
        candidate = self.hash_password(password, credentials.salt)
        return hmac.compare_digest(candidate, credentials.password_hash)

    def find_by_email(self, email: str) -> Optional[User]:
        wanted = email.lower()
        for user in self.users.values():
            if user.email.value.lower() == wanted:
                return user
        return None

    def find_by_token(self, token: str) -> Optional[User]:
        for user in self.users.values():
            if user.personal_link.token == token:
                return user
        return None

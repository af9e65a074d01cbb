"""
Auth Repository Port - Interface for authentication and session state.
Implementation: anonymous_message/infrastructure/memory/auth_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from anonymous_message.domain.entities.user import User


class AuthRepository(ABC):
    @abstractmethod
    async def login(self, email: str, password: str) -> User:
        """Start a session. Raises LoginError for rejected credentials."""
        ...

    @abstractmethod
    async def signup(self, username: str, email: str, password: str) -> User:
        """Create an account (with its personal link) and start a session."""
        ...

    @abstractmethod
    async def logout(self) -> None: ...

    @abstractmethod
    async def get_current_user(self) -> Optional[User]: ...

    @abstractmethod
    async def is_authenticated(self) -> bool: ...

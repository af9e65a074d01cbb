"""
User Repository Port - Interface for user persistence.
Implementation: anonymous_message/infrastructure/memory/user_repository.py
"""

from abc import ABC, abstractmethod

from anonymous_message.domain.entities.user import User
from anonymous_message.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def fetch_current_user(self) -> User: ...

    @abstractmethod
    async def update_user(self, user: User) -> User: ...

    @abstractmethod
    async def fetch_user_by_id(self, user_id: UserId) -> User: ...

    @abstractmethod
    async def fetch_user_by_personal_link(self, token: str) -> User: ...

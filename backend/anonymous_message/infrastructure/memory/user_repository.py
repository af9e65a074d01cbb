"""In-memory User Repository."""

from anonymous_message.domain.entities.user import User
from anonymous_message.domain.exceptions import AccessDeniedError, EntityNotFoundError
from anonymous_message.domain.ports.repositories import UserRepository
from anonymous_message.domain.value_objects.user_id import UserId
from anonymous_message.infrastructure.memory.user_store import InMemoryUserStore


class InMemoryUserRepository(UserRepository):
    _store: InMemoryUserStore

    def __init__(self, store: InMemoryUserStore):
        self._store = store

    async def fetch_current_user(self) -> User:
        if self._store.current_user_id is None:
            raise AccessDeniedError()
        return await self.fetch_user_by_id(self._store.current_user_id)

    async def update_user(self, user: User) -> User:
        if user.id.value not in self._store.users:
            raise EntityNotFoundError.for_entity("User", user.id)
        self._store.users[user.id.value] = user
        return user

    async def fetch_user_by_id(self, user_id: UserId) -> User:
        user = self._store.users.get(user_id.value)
        if user is None:
            raise EntityNotFoundError.for_entity("User", user_id)
        return user

    async def fetch_user_by_personal_link(self, token: str) -> User:
        user = self._store.find_by_token(token)
        if user is None:
            raise EntityNotFoundError(
                "No user owns this personal link.", entity="User"
            )
        return user

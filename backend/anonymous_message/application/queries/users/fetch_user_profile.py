"""
FetchUserProfile Query.

Three lookups, all straight pass-throughs to the UserRepository:
- no argument        → the signed-in user
- user_id            → by id
- personal_link_token → the owner of a personal link
"""

from dataclasses import dataclass
from typing import Optional

from anonymous_message.application.common.interfaces import Query, QueryHandler
from anonymous_message.domain.entities.user import User
from anonymous_message.domain.ports.repositories import UserRepository
from anonymous_message.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class FetchUserProfileQuery(Query[User]):
    user_id: Optional[UserId] = None
    personal_link_token: Optional[str] = None

    def __post_init__(self):
        if self.user_id is not None and self.personal_link_token is not None:
            raise ValueError("Pass either user_id or personal_link_token, not both")


class FetchUserProfileHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: FetchUserProfileQuery) -> User:
        if query.user_id is not None:
            return await self.by_id(query.user_id)
        if query.personal_link_token is not None:
            return await self.by_personal_link(query.personal_link_token)
        return await self.current_user()

    async def current_user(self) -> User:
        return await self._user_repository.fetch_current_user()

    async def by_id(self, user_id: UserId) -> User:
        return await self._user_repository.fetch_user_by_id(user_id)

    async def by_personal_link(self, token: str) -> User:
        return await self._user_repository.fetch_user_by_personal_link(token)

"""Fetch Contacts Query - newest registration first."""

from dataclasses import dataclass

from anonymous_message.application.common.interfaces import Query, QueryHandler
from anonymous_message.domain.entities.contact import Contact
from anonymous_message.domain.ports.repositories import ContactRepository
from anonymous_message.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class FetchContactsQuery(Query[list[Contact]]):
    user_id: UserId


class FetchContactsHandler(QueryHandler[list[Contact]]):
    def __init__(self, contact_repository: ContactRepository):
        self._contact_repository = contact_repository

    async def execute(self, query: FetchContactsQuery) -> list[Contact]:
        contacts = await self._contact_repository.fetch_contacts(query.user_id)
        return sorted(contacts, key=lambda c: c.registered_at, reverse=True)

    async def fetch_deletable(self, user_id: UserId) -> list[Contact]:
        contacts = await self.execute(FetchContactsQuery(user_id=user_id))
        return [c for c in contacts if c.is_deletable]

    async def fetch_locked(self, user_id: UserId) -> list[Contact]:
        contacts = await self.execute(FetchContactsQuery(user_id=user_id))
        return [c for c in contacts if not c.is_deletable]

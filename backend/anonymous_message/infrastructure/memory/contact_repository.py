"""In-memory Contact Repository."""

from anonymous_message.domain.entities.contact import Contact
from anonymous_message.domain.exceptions import EntityNotFoundError
from anonymous_message.domain.ports.repositories import ContactRepository
from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.user_id import UserId


class InMemoryContactRepository(ContactRepository):
    def __init__(self):
        self._contacts: dict[str, Contact] = {}

    async def fetch_contacts(self, owner_user_id: UserId) -> list[Contact]:
        return [c for c in self._contacts.values() if c.owner_user_id == owner_user_id]

    async def fetch_contact(self, contact_id: ContactId) -> Contact:
        contact = self._contacts.get(contact_id.value)
        if contact is None:
            raise EntityNotFoundError.for_entity("Contact", contact_id)
        return contact

    async def add_contact(self, contact: Contact) -> Contact:
        self._contacts[contact.id.value] = contact
        return contact

    async def delete_contact(self, contact_id: ContactId) -> None:
        if self._contacts.pop(contact_id.value, None) is None:
            raise EntityNotFoundError.for_entity("Contact", contact_id)

    async def update_contact(self, contact: Contact) -> Contact:
        existing = self._contacts.get(contact.id.value)
        if existing is None:
            raise EntityNotFoundError.for_entity("Contact", contact.id)
        if existing.registered_at != contact.registered_at:
            raise ValueError(f"registered_at of contact {contact.id} is immutable")
        self._contacts[contact.id.value] = contact
        return contact

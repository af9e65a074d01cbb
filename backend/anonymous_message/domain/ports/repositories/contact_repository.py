"""
Contact Repository Port - Interface for contact persistence.
Implementation: anonymous_message/infrastructure/memory/contact_repository.py
"""

from abc import ABC, abstractmethod

from anonymous_message.domain.entities.contact import Contact
from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.user_id import UserId


class ContactRepository(ABC):
    @abstractmethod
    async def fetch_contacts(self, owner_user_id: UserId) -> list[Contact]: ...

    @abstractmethod
    async def fetch_contact(self, contact_id: ContactId) -> Contact:
        """Raises EntityNotFoundError if the contact does not exist."""
        ...

    @abstractmethod
    async def add_contact(self, contact: Contact) -> Contact: ...

    @abstractmethod
    async def delete_contact(self, contact_id: ContactId) -> None: ...

    @abstractmethod
    async def update_contact(self, contact: Contact) -> Contact: ...

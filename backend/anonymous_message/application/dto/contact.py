"""Contact DTOs for the outer layer."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from anonymous_message.domain.entities.contact import Contact
from anonymous_message.domain.value_objects.contact_limit import ContactLimit


class ContactDTO(BaseModel):
    """Contact plus its lock state, as shown in the contact list."""

    id: str
    owner_user_id: str
    name: str
    relationship: Optional[str] = None
    memo: Optional[str] = None
    registered_at: datetime
    deletable_at: datetime
    is_deletable: bool
    remaining_lock_days: int
    lock_status_message: Optional[str] = None
    linked_user_id: Optional[str] = None

    @classmethod
    def from_entity(cls, contact: Contact) -> "ContactDTO":
        return cls(
            id=contact.id.value,
            owner_user_id=contact.owner_user_id.value,
            name=contact.name,
            relationship=contact.relationship,
            memo=contact.memo,
            registered_at=contact.registered_at,
            deletable_at=contact.deletable_at,
            is_deletable=contact.is_deletable,
            remaining_lock_days=contact.remaining_lock_days,
            lock_status_message=contact.lock_status_message,
            linked_user_id=(
                contact.linked_user_id.value if contact.linked_user_id else None
            ),
        )


class ContactListDTO(BaseModel):
    contacts: list[ContactDTO]
    total: int
    max_contacts: Optional[int] = None  # None = unlimited
    remaining_slots: Optional[int] = None
    needs_upgrade: bool = False

    @classmethod
    def from_entities(
        cls, contacts: list[Contact], is_premium: bool
    ) -> "ContactListDTO":
        limit = ContactLimit(current_count=len(contacts), is_premium=is_premium)
        return cls(
            contacts=[ContactDTO.from_entity(c) for c in contacts],
            total=len(contacts),
            max_contacts=None if is_premium else limit.max_contacts,
            remaining_slots=None if is_premium else limit.remaining_slots,
            needs_upgrade=limit.needs_upgrade,
        )

"""
ContactLimit Value Object - Contact quota and deletion lock policy.

Free users may register up to MAX_FREE_CONTACTS contacts, premium users are
unbounded. A registered contact cannot be deleted until DELETION_LOCK_PERIOD
has elapsed since registration.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Optional

from anonymous_message.domain.exceptions.contact_errors import (
    ContactLimitError,
    ContactLimitErrorKind,
)

if TYPE_CHECKING:
    from anonymous_message.domain.entities.contact import Contact

MAX_FREE_CONTACTS = 5
DELETION_LOCK_PERIOD = timedelta(days=3)
UNLIMITED_CONTACTS = sys.maxsize


@dataclass(frozen=True)
class ContactLimit:
    current_count: int
    is_premium: bool

    def __post_init__(self):
        if self.current_count < 0:
            raise ValueError(f"Contact count cannot be negative: {self.current_count}")

    @property
    def max_contacts(self) -> int:
        return UNLIMITED_CONTACTS if self.is_premium else MAX_FREE_CONTACTS

    @property
    def can_add_contact(self) -> bool:
        return self.current_count < self.max_contacts

    @property
    def remaining_slots(self) -> int:
        return max(0, self.max_contacts - self.current_count)

    @property
    def is_limit_reached(self) -> bool:
        return not self.can_add_contact

    @property
    def needs_upgrade(self) -> bool:
        return not self.is_premium and self.is_limit_reached

    @property
    def status_message(self) -> str:
        if self.is_premium:
            return "Premium: unlimited"
        return f"{self.current_count} / {self.max_contacts}"

    @property
    def limit_message(self) -> Optional[str]:
        if not self.is_limit_reached:
            return None
        return f"The free plan allows up to {MAX_FREE_CONTACTS} contacts."

    def can_delete_contact(self, contact: Contact) -> bool:
        return contact.is_deletable

    def deletion_block_reason(
        self, contact: Contact, now: Optional[datetime] = None
    ) -> Optional[str]:
        now = now or datetime.now(timezone.utc)
        if contact.is_deletable_at(now):
            return None
        return (
            "Contacts can be deleted 3 days after registration "
            f"({contact.remaining_lock_days_at(now)} day(s) left)."
        )

    def validate_add_contact(self) -> None:
        if not self.can_add_contact:
            raise ContactLimitError(ContactLimitErrorKind.LIMIT_REACHED)

    def validate_delete_contact(
        self, contact: Contact, now: Optional[datetime] = None
    ) -> None:
        """Raise DELETION_LOCKED while the contact is inside its lock window.

        Lock state and remaining days are judged against the same instant.
        """
        now = now or datetime.now(timezone.utc)
        if not contact.is_deletable_at(now):
            raise ContactLimitError(
                ContactLimitErrorKind.DELETION_LOCKED,
                remaining_days=contact.remaining_lock_days_at(now),
            )

"""
Contact Entity - A recipient registered by a user.

Contacts are locked for DELETION_LOCK_PERIOD after registration.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.contact_limit import DELETION_LOCK_PERIOD
from anonymous_message.domain.value_objects.user_id import UserId

_DAY = timedelta(days=1)


@dataclass(frozen=True)
class Contact:
    id: ContactId
    owner_user_id: UserId
    name: str
    registered_at: datetime
    relationship: Optional[str] = None
    memo: Optional[str] = None
    # The app user this contact stands for, once known
    linked_user_id: Optional[UserId] = None

    @classmethod
    def create(
        cls,
        owner_user_id: UserId,
        name: str,
        relationship: Optional[str] = None,
        memo: Optional[str] = None,
        linked_user_id: Optional[UserId] = None,
    ) -> Contact:
        """Factory method to create a new Contact registered now."""
        return cls(
            id=ContactId.generate(),
            owner_user_id=owner_user_id,
            name=name,
            registered_at=datetime.now(timezone.utc),
            relationship=relationship,
            memo=memo,
            linked_user_id=linked_user_id,
        )

    @property
    def deletable_at(self) -> datetime:
        return self.registered_at + DELETION_LOCK_PERIOD

    def is_deletable_at(self, now: datetime) -> bool:
        return now >= self.deletable_at

    def remaining_lock_days_at(self, now: datetime) -> int:
        remaining = self.deletable_at - now
        return max(0, math.ceil(remaining / _DAY))

    @property
    def is_deletable(self) -> bool:
        return self.is_deletable_at(datetime.now(timezone.utc))

    @property
    def remaining_lock_days(self) -> int:
        return self.remaining_lock_days_at(datetime.now(timezone.utc))

    @property
    def lock_status_message(self) -> Optional[str]:
        if self.is_deletable:
            return None
        return f"{self.remaining_lock_days} day(s) until deletable"

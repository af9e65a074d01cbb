"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from anonymous_message.domain.value_objects.user_id import UserId
from anonymous_message.domain.value_objects.user_email import UserEmail
from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.message_id import MessageId
from anonymous_message.domain.value_objects.answer_id import AnswerId
from anonymous_message.domain.value_objects.personal_link import (
    PersonalLink,
    generate_token,
)
from anonymous_message.domain.value_objects.contact_limit import (
    ContactLimit,
    DELETION_LOCK_PERIOD,
    MAX_FREE_CONTACTS,
)

__all__ = [
    "UserId",
    "UserEmail",
    "ContactId",
    "MessageId",
    "AnswerId",
    "PersonalLink",
    "generate_token",
    "ContactLimit",
    "DELETION_LOCK_PERIOD",
    "MAX_FREE_CONTACTS",
]

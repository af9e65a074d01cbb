"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Is an immutable snapshot (frozen dataclass); changes produce a new copy
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from anonymous_message.domain.entities.answer import Answer
from anonymous_message.domain.entities.contact import Contact
from anonymous_message.domain.entities.message import Message
from anonymous_message.domain.entities.message_status import MessageStatus
from anonymous_message.domain.entities.user import User

__all__ = [
    "Answer",
    "Contact",
    "Message",
    "MessageStatus",
    "User",
]

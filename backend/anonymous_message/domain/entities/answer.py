"""
Answer Entity - The one-time response to a received message.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from anonymous_message.domain.value_objects.answer_id import AnswerId
from anonymous_message.domain.value_objects.message_id import MessageId


@dataclass(frozen=True)
class Answer:
    id: AnswerId
    message_id: MessageId
    content: str
    answered_at: datetime

    @classmethod
    def create(cls, message_id: MessageId, content: str) -> Answer:
        """Factory method to create a new Answer with a generated ID and timestamp."""
        return cls(
            id=AnswerId.generate(),
            message_id=message_id,
            content=content,
            answered_at=datetime.now(timezone.utc),
        )

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()

"""
Message Entity - A one-way note from a sender to a receiver.

A message is ``pending`` until its receiver answers it; the answer is set
once and never replaced.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from anonymous_message.domain.entities.answer import Answer
from anonymous_message.domain.entities.message_status import MessageStatus
from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.message_id import MessageId
from anonymous_message.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Message:
    id: MessageId
    sender_id: UserId
    receiver_id: UserId
    content: str
    is_anonymous: bool
    sent_at: datetime
    contact_id: Optional[ContactId] = None
    answer: Optional[Answer] = None

    def __post_init__(self):
        if self.answer is not None and self.answer.message_id != self.id:
            raise ValueError(
                f"Answer {self.answer.id} belongs to message {self.answer.message_id}, not {self.id}"
            )

    @classmethod
    def create(
        cls,
        sender_id: UserId,
        receiver_id: UserId,
        content: str,
        is_anonymous: bool,
        contact_id: Optional[ContactId] = None,
    ) -> Message:
        """Factory method to create a new, unanswered Message."""
        return cls(
            id=MessageId.generate(),
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            is_anonymous=is_anonymous,
            sent_at=datetime.now(timezone.utc),
            contact_id=contact_id,
        )

    @property
    def status(self) -> MessageStatus:
        return MessageStatus.PENDING if self.answer is None else MessageStatus.ANSWERED

    @property
    def is_answered(self) -> bool:
        return self.answer is not None

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()

    @property
    def display_sender_name(self) -> str:
        return "Anonymous" if self.is_anonymous else "Unknown"

    def with_answer(self, answer: Answer) -> Message:
        """Return a copy carrying ``answer``. Refuses to overwrite an existing one."""
        if self.answer is not None:
            raise ValueError(f"Message {self.id} already has an answer")
        return replace(self, answer=answer)

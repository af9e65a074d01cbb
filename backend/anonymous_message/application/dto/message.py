"""Message DTOs for the outer layer."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from anonymous_message.domain.entities.answer import Answer
from anonymous_message.domain.entities.message import Message
from anonymous_message.domain.entities.message_status import MessageStatus


class AnswerDTO(BaseModel):
    id: str
    message_id: str
    content: str
    answered_at: datetime

    @classmethod
    def from_entity(cls, answer: Answer) -> "AnswerDTO":
        return cls(
            id=answer.id.value,
            message_id=answer.message_id.value,
            content=answer.content,
            answered_at=answer.answered_at,
        )


class MessageDTO(BaseModel):
    """
    Message as seen by its receiver.

    sender_id is withheld for anonymous messages; display_sender_name is
    what the UI should show instead.
    """

    id: str
    sender_id: Optional[str] = None
    receiver_id: str
    contact_id: Optional[str] = None
    content: str
    is_anonymous: bool
    display_sender_name: str
    sent_at: datetime
    status: MessageStatus
    answer: Optional[AnswerDTO] = None

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            sender_id=None if message.is_anonymous else message.sender_id.value,
            receiver_id=message.receiver_id.value,
            contact_id=message.contact_id.value if message.contact_id else None,
            content=message.content,
            is_anonymous=message.is_anonymous,
            display_sender_name=message.display_sender_name,
            sent_at=message.sent_at,
            status=message.status,
            answer=AnswerDTO.from_entity(message.answer) if message.answer else None,
        )

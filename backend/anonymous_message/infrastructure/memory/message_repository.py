"""
In-memory Message Repository.

answer_message() holds an asyncio.Lock across the "still unanswered?" check
and the write, so concurrent answers for one message commit exactly once.
"""

import asyncio
import logging

from anonymous_message.domain.entities.answer import Answer
from anonymous_message.domain.entities.message import Message
from anonymous_message.domain.exceptions import (
    AnswerMessageError,
    AnswerMessageErrorKind,
    EntityNotFoundError,
)
from anonymous_message.domain.ports.repositories import MessageRepository
from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.message_id import MessageId
from anonymous_message.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class InMemoryMessageRepository(MessageRepository):
    def __init__(self):
        self._messages: dict[str, Message] = {}
        self._lock = asyncio.Lock()

    async def send_message(self, message: Message) -> Message:
        async with self._lock:
            self._messages[message.id.value] = message
        return message

    async def fetch_sent_messages(self, user_id: UserId) -> list[Message]:
        return [m for m in self._messages.values() if m.sender_id == user_id]

    async def fetch_received_messages(self, user_id: UserId) -> list[Message]:
        return [m for m in self._messages.values() if m.receiver_id == user_id]

    async def fetch_message(self, message_id: MessageId) -> Message:
        message = self._messages.get(message_id.value)
        if message is None:
            raise EntityNotFoundError.for_entity("Message", message_id)
        return message

    async def fetch_messages_for_contact(self, contact_id: ContactId) -> list[Message]:
        return [m for m in self._messages.values() if m.contact_id == contact_id]

    async def answer_message(self, message_id: MessageId, answer: Answer) -> Message:
        async with self._lock:
            current = self._messages.get(message_id.value)
            if current is None:
                raise EntityNotFoundError.for_entity("Message", message_id)
            # compare-and-swap on answer is None
            if current.answer is not None:
                logger.info(f"Rejected second answer for message {message_id}")
                raise AnswerMessageError(AnswerMessageErrorKind.ALREADY_ANSWERED)

            answered = current.with_answer(answer)
            self._messages[message_id.value] = answered
            return answered

"""
Message Repository Port - Interface for message persistence.
Implementation: anonymous_message/infrastructure/memory/message_repository.py
"""

from abc import ABC, abstractmethod

from anonymous_message.domain.entities.answer import Answer
from anonymous_message.domain.entities.message import Message
from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.message_id import MessageId
from anonymous_message.domain.value_objects.user_id import UserId


class MessageRepository(ABC):
    @abstractmethod
    async def send_message(self, message: Message) -> Message: ...

    @abstractmethod
    async def fetch_sent_messages(self, user_id: UserId) -> list[Message]: ...

    @abstractmethod
    async def fetch_received_messages(self, user_id: UserId) -> list[Message]: ...

    @abstractmethod
    async def fetch_message(self, message_id: MessageId) -> Message:
        """Raises EntityNotFoundError if the message does not exist."""
        ...

    @abstractmethod
    async def fetch_messages_for_contact(
        self, contact_id: ContactId
    ) -> list[Message]: ...

    @abstractmethod
    async def answer_message(self, message_id: MessageId, answer: Answer) -> Message:
        """
        Attach ``answer`` to the message exactly once.

        Must be atomic against concurrent callers: the check that the message
        is still unanswered and the write happen as one step. The losing
        writer gets AnswerMessageError(ALREADY_ANSWERED).
        """
        ...

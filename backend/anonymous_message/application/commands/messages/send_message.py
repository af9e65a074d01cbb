"""
SendMessage Command - Deliver a message to one of the sender's contacts.

Handler:
1. Validate content (trimmed, 10-1000 chars)
2. Load the contact and verify the sender owns it
3. Resolve the receiver from the contact's linked user
4. Persist a new, unanswered message
"""

import logging
from dataclasses import dataclass

from anonymous_message.application.common.interfaces import Command, CommandHandler
from anonymous_message.domain.entities.contact import Contact
from anonymous_message.domain.entities.message import Message
from anonymous_message.domain.exceptions import SendMessageError, SendMessageErrorKind
from anonymous_message.domain.ports.repositories import (
    ContactRepository,
    MessageRepository,
)
from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 1000


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    sender_id: UserId
    contact_id: ContactId
    content: str
    is_anonymous: bool = True


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        message_repository: MessageRepository,
        contact_repository: ContactRepository,
    ):
        self._message_repository = message_repository
        self._contact_repository = contact_repository

    async def execute(self, command: SendMessageCommand) -> Message:
        self._validate_content(command.content)

        contact = await self._contact_repository.fetch_contact(command.contact_id)
        if contact.owner_user_id != command.sender_id:
            logger.warning(
                f"User {command.sender_id} tried to message contact {contact.id} "
                f"owned by {contact.owner_user_id}"
            )
            raise SendMessageError(SendMessageErrorKind.UNAUTHORIZED_CONTACT)

        receiver_id = self._resolve_receiver(contact, command.sender_id)

        message = Message.create(
            sender_id=command.sender_id,
            receiver_id=receiver_id,
            content=command.content,
            is_anonymous=command.is_anonymous,
            contact_id=contact.id,
        )
        sent = await self._message_repository.send_message(message)
        logger.info(f"Message {sent.id} sent to contact {contact.id}")
        return sent

    def _validate_content(self, content: str) -> None:
        trimmed = content.strip()
        if not trimmed:
            raise SendMessageError(SendMessageErrorKind.EMPTY_CONTENT)
        if len(trimmed) < CONTENT_MIN_LENGTH:
            raise SendMessageError(SendMessageErrorKind.CONTENT_TOO_SHORT)
        if len(trimmed) > CONTENT_MAX_LENGTH:
            raise SendMessageError(SendMessageErrorKind.CONTENT_TOO_LONG)

    def _resolve_receiver(self, contact: Contact, sender_id: UserId) -> UserId:
        # The owner is always the sender here, so the receiver has to come
        # from the user the contact is linked to
        if contact.linked_user_id is None:
            raise SendMessageError(SendMessageErrorKind.RECEIVER_UNRESOLVED)
        if contact.linked_user_id == sender_id:
            raise SendMessageError(SendMessageErrorKind.SEND_TO_SELF)
        return contact.linked_user_id

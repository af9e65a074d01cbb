"""
AnswerMessage Command - The receiver answers a message, once.

The pre-check for an existing answer gives a fast, friendly error; the
repository's answer_message() is what actually guarantees a single answer
when two requests race.
"""

import logging
from dataclasses import dataclass

from anonymous_message.application.common.interfaces import Command, CommandHandler
from anonymous_message.domain.entities.answer import Answer
from anonymous_message.domain.entities.message import Message
from anonymous_message.domain.exceptions import (
    AnswerMessageError,
    AnswerMessageErrorKind,
)
from anonymous_message.domain.ports.repositories import MessageRepository
from anonymous_message.domain.value_objects.message_id import MessageId
from anonymous_message.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

CONTENT_MIN_LENGTH = 5
CONTENT_MAX_LENGTH = 1000


@dataclass(frozen=True)
class AnswerMessageCommand(Command[Message]):
    message_id: MessageId
    content: str
    answerer_id: UserId


class AnswerMessageHandler(CommandHandler[Message]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: AnswerMessageCommand) -> Message:
        """
        Raises:
            AnswerMessageError: invalid content, answerer is not the
                receiver, or the message already has an answer
            EntityNotFoundError: from the repository, if the message is unknown
        """
        self._validate_content(command.content)

        message = await self._message_repository.fetch_message(command.message_id)

        if message.receiver_id != command.answerer_id:
            logger.warning(
                f"User {command.answerer_id} tried to answer message {message.id}"
            )
            raise AnswerMessageError(AnswerMessageErrorKind.UNAUTHORIZED)

        if message.is_answered:
            raise AnswerMessageError(AnswerMessageErrorKind.ALREADY_ANSWERED)

        answer = Answer.create(message_id=message.id, content=command.content)
        answered = await self._message_repository.answer_message(message.id, answer)
        logger.info(f"Message {message.id} answered")
        return answered

    def _validate_content(self, content: str) -> None:
        trimmed = content.strip()
        if not trimmed:
            raise AnswerMessageError(AnswerMessageErrorKind.EMPTY_CONTENT)
        if len(trimmed) < CONTENT_MIN_LENGTH:
            raise AnswerMessageError(AnswerMessageErrorKind.CONTENT_TOO_SHORT)
        if len(trimmed) > CONTENT_MAX_LENGTH:
            raise AnswerMessageError(AnswerMessageErrorKind.CONTENT_TOO_LONG)

"""Message commands."""

from .answer_message import AnswerMessageCommand, AnswerMessageHandler
from .send_message import SendMessageCommand, SendMessageHandler

__all__ = [
    "AnswerMessageCommand",
    "AnswerMessageHandler",
    "SendMessageCommand",
    "SendMessageHandler",
]

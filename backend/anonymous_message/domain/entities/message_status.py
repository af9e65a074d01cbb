"""
MessageStatus - Derived lifecycle state of a message.
"""

from enum import Enum


class MessageStatus(str, Enum):
    PENDING = "pending"
    ANSWERED = "answered"

    @property
    def display_text(self) -> str:
        if self is MessageStatus.PENDING:
            return "Awaiting answer"
        return "Answered"

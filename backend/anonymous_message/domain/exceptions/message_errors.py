"""
Message errors - send and answer failures.
"""

from enum import Enum

from anonymous_message.domain.exceptions.domain_error import DomainError


class SendMessageErrorKind(str, Enum):
    EMPTY_CONTENT = "empty_content"
    CONTENT_TOO_SHORT = "content_too_short"
    CONTENT_TOO_LONG = "content_too_long"
    UNAUTHORIZED_CONTACT = "unauthorized_contact"
    RECEIVER_UNRESOLVED = "receiver_unresolved"
    SEND_TO_SELF = "send_to_self"


class SendMessageError(DomainError):
    messages = {
        SendMessageErrorKind.EMPTY_CONTENT: "Please enter a message.",
        SendMessageErrorKind.CONTENT_TOO_SHORT: "Messages must be at least 10 characters.",
        SendMessageErrorKind.CONTENT_TOO_LONG: "Messages can be at most 1000 characters.",
        SendMessageErrorKind.UNAUTHORIZED_CONTACT: (
            "You can only send messages to contacts you registered."
        ),
        SendMessageErrorKind.RECEIVER_UNRESOLVED: (
            "This contact is not linked to a user yet."
        ),
        SendMessageErrorKind.SEND_TO_SELF: "You cannot send a message to yourself.",
    }


class AnswerMessageErrorKind(str, Enum):
    EMPTY_CONTENT = "empty_content"
    CONTENT_TOO_SHORT = "content_too_short"
    CONTENT_TOO_LONG = "content_too_long"
    UNAUTHORIZED = "unauthorized"
    ALREADY_ANSWERED = "already_answered"


class AnswerMessageError(DomainError):
    messages = {
        AnswerMessageErrorKind.EMPTY_CONTENT: "Please enter an answer.",
        AnswerMessageErrorKind.CONTENT_TOO_SHORT: "Answers must be at least 5 characters.",
        AnswerMessageErrorKind.CONTENT_TOO_LONG: "Answers can be at most 1000 characters.",
        AnswerMessageErrorKind.UNAUTHORIZED: "You can only answer messages you received.",
        AnswerMessageErrorKind.ALREADY_ANSWERED: "This message has already been answered.",
    }

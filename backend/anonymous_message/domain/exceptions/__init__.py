"""
DOMAIN EXCEPTIONS - Business rule violations

Use case errors derive from DomainError and carry a closed ``kind``.
Ports raise EntityNotFoundError / AccessDeniedError; use cases let those
propagate unchanged.
"""

from anonymous_message.domain.exceptions.domain_error import DomainError
from anonymous_message.domain.exceptions.entity_not_found import EntityNotFoundError
from anonymous_message.domain.exceptions.access_denied import AccessDeniedError
from anonymous_message.domain.exceptions.auth_errors import (
    LoginError,
    LoginErrorKind,
    LogoutError,
    LogoutErrorKind,
    SignupError,
    SignupErrorKind,
)
from anonymous_message.domain.exceptions.contact_errors import (
    AddContactError,
    AddContactErrorKind,
    ContactLimitError,
    ContactLimitErrorKind,
    DeleteContactError,
    DeleteContactErrorKind,
    UpdateContactError,
    UpdateContactErrorKind,
)
from anonymous_message.domain.exceptions.message_errors import (
    AnswerMessageError,
    AnswerMessageErrorKind,
    SendMessageError,
    SendMessageErrorKind,
)
from anonymous_message.domain.exceptions.user_errors import (
    UpdateUserProfileError,
    UpdateUserProfileErrorKind,
)

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "AccessDeniedError",
    "LoginError",
    "LoginErrorKind",
    "LogoutError",
    "LogoutErrorKind",
    "SignupError",
    "SignupErrorKind",
    "AddContactError",
    "AddContactErrorKind",
    "ContactLimitError",
    "ContactLimitErrorKind",
    "DeleteContactError",
    "DeleteContactErrorKind",
    "UpdateContactError",
    "UpdateContactErrorKind",
    "AnswerMessageError",
    "AnswerMessageErrorKind",
    "SendMessageError",
    "SendMessageErrorKind",
    "UpdateUserProfileError",
    "UpdateUserProfileErrorKind",
]

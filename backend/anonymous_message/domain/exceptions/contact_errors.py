"""
Contact errors - add, update, delete and quota failures.
"""

from enum import Enum

from anonymous_message.domain.exceptions.domain_error import DomainError


class AddContactErrorKind(str, Enum):
    EMPTY_NAME = "empty_name"
    NAME_TOO_LONG = "name_too_long"
    RELATIONSHIP_TOO_LONG = "relationship_too_long"
    MEMO_TOO_LONG = "memo_too_long"
    DUPLICATE_NAME = "duplicate_name"
    LIMIT_REACHED = "limit_reached"


class AddContactError(DomainError):
    messages = {
        AddContactErrorKind.EMPTY_NAME: "Please enter a name.",
        AddContactErrorKind.NAME_TOO_LONG: "Name can be at most 50 characters.",
        AddContactErrorKind.RELATIONSHIP_TOO_LONG: "Relationship can be at most 20 characters.",
        AddContactErrorKind.MEMO_TOO_LONG: "Memo can be at most 200 characters.",
        AddContactErrorKind.DUPLICATE_NAME: "A contact with this name already exists.",
        AddContactErrorKind.LIMIT_REACHED: (
            "You can register up to {maximum} contacts (current: {current})."
        ),
    }


class UpdateContactErrorKind(str, Enum):
    EMPTY_NAME = "empty_name"
    NAME_TOO_LONG = "name_too_long"
    RELATIONSHIP_TOO_LONG = "relationship_too_long"
    MEMO_TOO_LONG = "memo_too_long"
    DUPLICATE_NAME = "duplicate_name"


class UpdateContactError(DomainError):
    messages = {
        UpdateContactErrorKind.EMPTY_NAME: "Please enter a name.",
        UpdateContactErrorKind.NAME_TOO_LONG: "Name can be at most 50 characters.",
        UpdateContactErrorKind.RELATIONSHIP_TOO_LONG: "Relationship can be at most 20 characters.",
        UpdateContactErrorKind.MEMO_TOO_LONG: "Memo can be at most 200 characters.",
        UpdateContactErrorKind.DUPLICATE_NAME: "A contact with this name already exists.",
    }


class DeleteContactErrorKind(str, Enum):
    CONTACT_LOCKED = "contact_locked"


class DeleteContactError(DomainError):
    messages = {
        DeleteContactErrorKind.CONTACT_LOCKED: (
            "Contacts can be deleted 3 days after registration. "
            "Deletable from {deletable_at:%Y-%m-%d} ({remaining_days} day(s) left)."
        ),
    }


class ContactLimitErrorKind(str, Enum):
    LIMIT_REACHED = "limit_reached"
    DELETION_LOCKED = "deletion_locked"


class ContactLimitError(DomainError):
    messages = {
        ContactLimitErrorKind.LIMIT_REACHED: "The contact limit has been reached.",
        ContactLimitErrorKind.DELETION_LOCKED: (
            "Contacts can be deleted 3 days after registration "
            "({remaining_days} day(s) left)."
        ),
    }

"""Contact commands."""

from .add_contact import AddContactCommand, AddContactHandler
from .delete_contact import (
    DeleteContactCommand,
    DeleteContactHandler,
    ForceDeleteContactCommand,
    ForceDeleteContactHandler,
)
from .update_contact import UpdateContactCommand, UpdateContactHandler

__all__ = [
    "AddContactCommand",
    "AddContactHandler",
    "DeleteContactCommand",
    "DeleteContactHandler",
    "ForceDeleteContactCommand",
    "ForceDeleteContactHandler",
    "UpdateContactCommand",
    "UpdateContactHandler",
]

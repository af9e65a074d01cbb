"""
Add Contact Command.

Steps:
1. Validate name / relationship / memo
2. Load the owner's current contacts
3. Enforce the ContactLimit quota (free: 5, premium: unbounded)
4. Reject an exact duplicate name
5. Persist a new Contact registered now
"""

import logging
from dataclasses import dataclass
from typing import Optional

from anonymous_message.application.commands.contacts.rules import (
    validate_contact_fields,
)
from anonymous_message.application.common.interfaces import Command, CommandHandler
from anonymous_message.domain.entities.contact import Contact
from anonymous_message.domain.exceptions import AddContactError, AddContactErrorKind
from anonymous_message.domain.ports.repositories import ContactRepository
from anonymous_message.domain.value_objects.contact_limit import ContactLimit
from anonymous_message.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddContactCommand(Command[Contact]):
    owner_user_id: UserId
    name: str
    relationship: Optional[str] = None
    memo: Optional[str] = None
    is_premium: bool = False
    linked_user_id: Optional[UserId] = None


class AddContactHandler(CommandHandler[Contact]):
    def __init__(self, contact_repository: ContactRepository):
        self._contact_repository = contact_repository

    async def execute(self, command: AddContactCommand) -> Contact:
        validate_contact_fields(
            command.name,
            command.relationship,
            command.memo,
            error=AddContactError,
            kinds=AddContactErrorKind,
        )

        current_contacts = await self._contact_repository.fetch_contacts(
            command.owner_user_id
        )
        limit = ContactLimit(
            current_count=len(current_contacts), is_premium=command.is_premium
        )
        if not limit.can_add_contact:
            logger.info(
                f"User {command.owner_user_id} hit the contact limit "
                f"({limit.current_count}/{limit.max_contacts})"
            )
            raise AddContactError(
                AddContactErrorKind.LIMIT_REACHED,
                current=limit.current_count,
                maximum=limit.max_contacts,
            )

        if any(contact.name == command.name for contact in current_contacts):
            raise AddContactError(AddContactErrorKind.DUPLICATE_NAME)

        contact = Contact.create(
            owner_user_id=command.owner_user_id,
            name=command.name,
            relationship=command.relationship,
            memo=command.memo,
            linked_user_id=command.linked_user_id,
        )
        saved = await self._contact_repository.add_contact(contact)
        logger.info(f"Contact {saved.id} added for user {command.owner_user_id}")
        return saved

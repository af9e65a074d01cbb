"""
Update Contact Command.

Fields left as UNSET keep their current value; None clears relationship or
memo. The merged contact is validated with the same rules as AddContact.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from anonymous_message.application.commands.contacts.rules import (
    validate_contact_fields,
)
from anonymous_message.application.common.interfaces import Command, CommandHandler
from anonymous_message.application.common.patch import UNSET, Patchable, merge
from anonymous_message.domain.entities.contact import Contact
from anonymous_message.domain.exceptions import (
    UpdateContactError,
    UpdateContactErrorKind,
)
from anonymous_message.domain.ports.repositories import ContactRepository
from anonymous_message.domain.value_objects.contact_id import ContactId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateContactCommand(Command[Contact]):
    contact_id: ContactId
    name: Patchable[str] = UNSET
    relationship: Patchable[str] = UNSET
    memo: Patchable[str] = UNSET


class UpdateContactHandler(CommandHandler[Contact]):
    def __init__(self, contact_repository: ContactRepository):
        self._contact_repository = contact_repository

    async def execute(self, command: UpdateContactCommand) -> Contact:
        existing = await self._contact_repository.fetch_contact(command.contact_id)

        name: Optional[str] = merge(command.name, existing.name)
        relationship = merge(command.relationship, existing.relationship)
        memo = merge(command.memo, existing.memo)

        validate_contact_fields(
            name,
            relationship,
            memo,
            error=UpdateContactError,
            kinds=UpdateContactErrorKind,
        )

        if name != existing.name:
            siblings = await self._contact_repository.fetch_contacts(
                existing.owner_user_id
            )
            if any(c.name == name and c.id != existing.id for c in siblings):
                raise UpdateContactError(UpdateContactErrorKind.DUPLICATE_NAME)

        # id, owner, registered_at and linked user are carried over by replace()
        updated = replace(existing, name=name, relationship=relationship, memo=memo)
        saved = await self._contact_repository.update_contact(updated)
        logger.info(f"Contact {saved.id} updated")
        return saved

"""
Delete Contact Commands.

DeleteContactHandler refuses to delete a contact during its 3-day lock.
ForceDeleteContactHandler skips the lock; authorising that call is up to
the caller.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from anonymous_message.application.common.interfaces import Command, CommandHandler
from anonymous_message.domain.exceptions import (
    DeleteContactError,
    DeleteContactErrorKind,
)
from anonymous_message.domain.ports.repositories import ContactRepository
from anonymous_message.domain.value_objects.contact_id import ContactId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteContactCommand(Command[None]):
    contact_id: ContactId


@dataclass(frozen=True)
class ForceDeleteContactCommand(Command[None]):
    contact_id: ContactId


class DeleteContactHandler(CommandHandler[None]):
    def __init__(
        self,
        contact_repository: ContactRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._contact_repository = contact_repository
        self._clock = clock

    async def execute(self, command: DeleteContactCommand) -> None:
        contact = await self._contact_repository.fetch_contact(command.contact_id)
        now = self._clock()

        if not contact.is_deletable_at(now):
            raise DeleteContactError(
                DeleteContactErrorKind.CONTACT_LOCKED,
                remaining_days=contact.remaining_lock_days_at(now),
                deletable_at=contact.deletable_at,
            )

        await self._contact_repository.delete_contact(command.contact_id)
        logger.info(f"Contact {command.contact_id} deleted")


class ForceDeleteContactHandler(CommandHandler[None]):
    def __init__(self, contact_repository: ContactRepository):
        self._contact_repository = contact_repository

    async def execute(self, command: ForceDeleteContactCommand) -> None:
        await self._contact_repository.delete_contact(command.contact_id)
        logger.warning(f"Contact {command.contact_id} force-deleted")

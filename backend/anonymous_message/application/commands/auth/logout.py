"""Logout Command."""

import logging
from dataclasses import dataclass

from anonymous_message.application.common.interfaces import Command, CommandHandler
from anonymous_message.domain.exceptions import LogoutError, LogoutErrorKind
from anonymous_message.domain.ports.repositories import AuthRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogoutCommand(Command[None]):
    pass


class LogoutHandler(CommandHandler[None]):
    def __init__(self, auth_repository: AuthRepository):
        self._auth_repository = auth_repository

    async def execute(self, command: LogoutCommand) -> None:
        if not await self._auth_repository.is_authenticated():
            raise LogoutError(LogoutErrorKind.NOT_AUTHENTICATED)

        await self._auth_repository.logout()
        logger.info("User logged out")

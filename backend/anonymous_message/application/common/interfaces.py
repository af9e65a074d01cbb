"""
Command/Query base classes.

Commands change state (add a contact, answer a message), queries only read
(message history, contact list). Each use case is a frozen dataclass plus a
handler whose ``execute`` coroutine validates input, talks to the ports and
returns an entity or raises a DomainError.

Usage:
    @dataclass(frozen=True)
    class DeleteContactCommand(Command[None]):
        contact_id: ContactId

    class DeleteContactHandler(CommandHandler[None]):
        def __init__(self, contact_repository: ContactRepository):
            self._contact_repository = contact_repository

        async def execute(self, command: DeleteContactCommand) -> None:
            contact = await self._contact_repository.fetch_contact(command.contact_id)
            ...
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

R = TypeVar("R")


class Command(ABC, Generic[R]):
    """Input of a state-changing use case; R is the handler's result type."""


class CommandHandler(ABC, Generic[R]):
    @abstractmethod
    async def execute(self, command: Command[R]) -> R: ...


class Query(ABC, Generic[R]):
    """Input of a read-only use case."""


class QueryHandler(ABC, Generic[R]):
    @abstractmethod
    async def execute(self, query: Query[R]) -> R: ...

"""
FetchMessageHistory Query - Sent, received or per-contact message lists.

The history kind is a small tagged union:

    SentHistory()                → messages the user sent
    ReceivedHistory()            → messages the user received
    ContactHistory(contact_id)   → messages sent through one contact

Results are ordered by sent_at, newest first.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from anonymous_message.application.common.interfaces import Query, QueryHandler
from anonymous_message.domain.entities.message import Message
from anonymous_message.domain.ports.repositories import MessageRepository
from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class SentHistory:
    display_name = "Sent messages"


@dataclass(frozen=True)
class ReceivedHistory:
    display_name = "Received messages"


@dataclass(frozen=True)
class ContactHistory:
    contact_id: ContactId
    display_name = "Conversation"


HistoryType = Union[SentHistory, ReceivedHistory, ContactHistory]


@dataclass(frozen=True)
class FetchMessageHistoryQuery(Query[list[Message]]):
    user_id: UserId
    history: HistoryType


class FetchMessageHistoryHandler(QueryHandler[list[Message]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: FetchMessageHistoryQuery) -> list[Message]:
        history = query.history
        if isinstance(history, SentHistory):
            messages = await self._message_repository.fetch_sent_messages(
                query.user_id
            )
        elif isinstance(history, ReceivedHistory):
            messages = await self._message_repository.fetch_received_messages(
                query.user_id
            )
        elif isinstance(history, ContactHistory):
            messages = await self._message_repository.fetch_messages_for_contact(
                history.contact_id
            )
        else:
            raise TypeError(f"Unknown history type: {history!r}")

        return sorted(messages, key=lambda m: m.sent_at, reverse=True)

    async def fetch_answered(
        self, user_id: UserId, history: HistoryType
    ) -> list[Message]:
        messages = await self.execute(FetchMessageHistoryQuery(user_id, history))
        return [m for m in messages if m.is_answered]

    async def fetch_pending(
        self, user_id: UserId, history: HistoryType
    ) -> list[Message]:
        messages = await self.execute(FetchMessageHistoryQuery(user_id, history))
        return [m for m in messages if not m.is_answered]

    async def fetch_between(
        self,
        user_id: UserId,
        history: HistoryType,
        start: datetime,
        end: datetime,
    ) -> list[Message]:
        """Messages with start <= sent_at <= end."""
        messages = await self.execute(FetchMessageHistoryQuery(user_id, history))
        return [m for m in messages if start <= m.sent_at <= end]

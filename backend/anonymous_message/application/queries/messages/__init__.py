"""Message queries."""

from anonymous_message.application.queries.messages.fetch_message_history import (
    ContactHistory,
    FetchMessageHistoryHandler,
    FetchMessageHistoryQuery,
    HistoryType,
    ReceivedHistory,
    SentHistory,
)

__all__ = [
    "ContactHistory",
    "FetchMessageHistoryHandler",
    "FetchMessageHistoryQuery",
    "HistoryType",
    "ReceivedHistory",
    "SentHistory",
]

"""Contact queries."""

from anonymous_message.application.queries.contacts.fetch_contacts import (
    FetchContactsHandler,
    FetchContactsQuery,
)

__all__ = [
    "FetchContactsQuery",
    "FetchContactsHandler",
]

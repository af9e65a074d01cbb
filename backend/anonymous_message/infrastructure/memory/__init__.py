"""
In-memory adapters for the repository ports.

The auth and user repositories share one InMemoryUserStore so that a signup
is visible to profile lookups.
"""

from anonymous_message.infrastructure.memory.user_store import InMemoryUserStore
from anonymous_message.infrastructure.memory.auth_repository import (
    InMemoryAuthRepository,
)
from anonymous_message.infrastructure.memory.user_repository import (
    InMemoryUserRepository,
)
from anonymous_message.infrastructure.memory.contact_repository import (
    InMemoryContactRepository,
)
from anonymous_message.infrastructure.memory.message_repository import (
    InMemoryMessageRepository,
)

__all__ = [
    "InMemoryUserStore",
    "InMemoryAuthRepository",
    "InMemoryUserRepository",
    "InMemoryContactRepository",
    "InMemoryMessageRepository",
]

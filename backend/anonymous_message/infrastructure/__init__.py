"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- memory/: In-memory implementations of the auth, user, contact and message
  repositories (development and tests)
"""

from anonymous_message.infrastructure.memory import (
    InMemoryAuthRepository,
    InMemoryContactRepository,
    InMemoryMessageRepository,
    InMemoryUserRepository,
    InMemoryUserStore,
)

__all__ = [
    "InMemoryAuthRepository",
    "InMemoryContactRepository",
    "InMemoryMessageRepository",
    "InMemoryUserRepository",
    "InMemoryUserStore",
]

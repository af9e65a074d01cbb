"""
REPOSITORY PORTS - Data access interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines async methods the use cases need
- Does NOT specify implementation

Infrastructure layer provides implementations.
"""

from anonymous_message.domain.ports.repositories.auth_repository import AuthRepository
from anonymous_message.domain.ports.repositories.user_repository import UserRepository
from anonymous_message.domain.ports.repositories.contact_repository import (
    ContactRepository,
)
from anonymous_message.domain.ports.repositories.message_repository import (
    MessageRepository,
)

__all__ = [
    "AuthRepository",
    "UserRepository",
    "ContactRepository",
    "MessageRepository",
]

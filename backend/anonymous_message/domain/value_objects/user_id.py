"""
UserId Value Object - Identity of an application user.

The value is stored in canonical form (lowercase, hyphenated), so ids
coming from clients that print UUIDs in uppercase still compare equal.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class UserId:
    value: str  # user_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("User ID cannot be empty")
        object.__setattr__(self, "value", str(UUID(self.value)))

    @classmethod
    def generate(cls) -> "UserId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value

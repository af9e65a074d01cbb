"""
MessageId Value Object - Identity of a sent message.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class MessageId:
    value: str  # message_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("Message ID cannot be empty")
        object.__setattr__(self, "value", str(UUID(self.value)))

    @classmethod
    def generate(cls) -> "MessageId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value

"""
ContactId Value Object - Identity of a registered contact.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ContactId:
    value: str  # contact_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("Contact ID cannot be empty")
        object.__setattr__(self, "value", str(UUID(self.value)))

    @classmethod
    def generate(cls) -> "ContactId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value

"""
AnswerId Value Object - Identity of an answer.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class AnswerId:
    value: str  # answer_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("Answer ID cannot be empty")
        object.__setattr__(self, "value", str(UUID(self.value)))

    @classmethod
    def generate(cls) -> "AnswerId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value

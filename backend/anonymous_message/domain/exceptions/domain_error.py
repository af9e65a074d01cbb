"""
DomainError - Base class for use case failures.

Each use case owns a closed ``Enum`` of failure kinds. Callers should branch
on ``error.kind``; ``error.message`` is for humans and may change.
Maps to: HTTP 4xx depending on kind (decided by the outer layer)
"""

from enum import Enum
from typing import Any, ClassVar, Optional


class DomainError(Exception):
    """Raised when a business rule rejects an operation."""

    messages: ClassVar[dict] = {}

    def __init__(self, kind: Enum, message: Optional[str] = None, **details: Any):
        self.kind = kind
        self.details = details
        if message is None:
            template = self.messages.get(kind)
            message = template.format(**details) if template else str(kind.value)
        self.message = message
        super().__init__(message)

    def __reduce__(self):
        # BaseException rebuilds from self.args, which only holds the message
        return (type(self), (self.kind, self.message), {"details": self.details})

    def __getattr__(self, name: str) -> Any:
        # Expose details as attributes: error.remaining_days, error.current, ...
        details = self.__dict__.get("details", {})
        if name in details:
            return details[name]
        raise AttributeError(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.name}, details={self.details!r})"

"""
EntityNotFoundError - A port could not find the requested user, contact or
message.
Maps to: HTTP 404 Not Found
"""

from typing import Optional


class EntityNotFoundError(Exception):
    def __init__(
        self,
        message: str = "The requested entity was not found.",
        entity: Optional[str] = None,
        identifier: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.entity = entity
        self.identifier = identifier

    @classmethod
    def for_entity(cls, entity: str, identifier: object) -> "EntityNotFoundError":
        return cls(
            f"{entity} {identifier} not found.",
            entity=entity,
            identifier=str(identifier),
        )

"""Field rules shared by AddContact and UpdateContact."""

from enum import Enum
from typing import Optional, Type

from anonymous_message.application.common.validation import is_blank
from anonymous_message.domain.exceptions import DomainError

NAME_MAX_LENGTH = 50
RELATIONSHIP_MAX_LENGTH = 20
MEMO_MAX_LENGTH = 200


def validate_contact_fields(
    name: Optional[str],
    relationship: Optional[str],
    memo: Optional[str],
    error: Type[DomainError],
    kinds: Type[Enum],
) -> None:
    """
    Raise ``error(kinds.<KIND>)`` for the first field that breaks a rule.

    ``kinds`` must define EMPTY_NAME, NAME_TOO_LONG, RELATIONSHIP_TOO_LONG
    and MEMO_TOO_LONG. Empty relationship/memo are accepted as "not given".
    """
    if is_blank(name):
        raise error(kinds.EMPTY_NAME)
    if len(name) > NAME_MAX_LENGTH:
        raise error(kinds.NAME_TOO_LONG)

    if relationship and len(relationship) > RELATIONSHIP_MAX_LENGTH:
        raise error(kinds.RELATIONSHIP_TOO_LONG)

    if memo and len(memo) > MEMO_MAX_LENGTH:
        raise error(kinds.MEMO_TOO_LONG)

"""Field rules shared by several use cases."""

import re
from typing import Optional

from anonymous_message.domain.value_objects.user_email import is_valid_email

USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 20

LOGIN_PASSWORD_MIN_LENGTH = 6
SIGNUP_PASSWORD_MIN_LENGTH = 8
SIGNUP_PASSWORD_MAX_LENGTH = 50

_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"[0-9]")

__all__ = [
    "USERNAME_MIN_LENGTH",
    "USERNAME_MAX_LENGTH",
    "LOGIN_PASSWORD_MIN_LENGTH",
    "SIGNUP_PASSWORD_MIN_LENGTH",
    "SIGNUP_PASSWORD_MAX_LENGTH",
    "is_blank",
    "is_valid_email",
    "has_letter_and_digit",
]


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def has_letter_and_digit(password: str) -> bool:
    return bool(_LETTER.search(password)) and bool(_DIGIT.search(password))

"""
UserEmail Value Object - Wraps user email with format validation.
"""

import re
from dataclasses import dataclass

# Same pattern the login/signup forms enforce, matched against the whole string
EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class UserEmail:
    value: str  # user_email, presented as email

    def __post_init__(self):
        if not self.value or not is_valid_email(self.value):
            raise ValueError(f"Invalid user email: {self.value}")

    def __str__(self) -> str:
        return self.value

"""
PersonalLink Value Object - A user's public address for receiving messages.

Every user owns exactly one link, generated at signup. The token is the only
part that travels: the surrounding app shares ``build_url(base_url)`` and resolves incoming
requests back to the owner with ``UserRepository.fetch_user_by_personal_link``.
"""

import secrets
import string
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from anonymous_message.domain.value_objects.user_id import UserId

TOKEN_ALPHABET = string.ascii_letters + string.digits
TOKEN_LENGTH = 32
MIN_VALID_TOKEN_LENGTH = 8


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


def generate_token(random_source: RandomSource, length: int = TOKEN_LENGTH) -> str:
    """Build a random alphanumeric token from the given entropy source.

    Pass a seeded ``random.Random`` for deterministic tokens in tests.
    """
    return "".join(random_source.choice(TOKEN_ALPHABET) for _ in range(length))


@dataclass(frozen=True)
class PersonalLink:
    user_id: UserId
    token: str

    @classmethod
    def generate(
        cls, user_id: UserId, random_source: Optional[RandomSource] = None
    ) -> "PersonalLink":
        """Create a new link with a fresh 32-character token."""
        source = random_source or secrets.SystemRandom()
        return cls(user_id=user_id, token=generate_token(source))

    @property
    def is_valid(self) -> bool:
        return len(self.token) >= MIN_VALID_TOKEN_LENGTH

    # base_url is Config.PERSONAL_LINK_BASE_URL of the running deployment
    def build_url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/receive/{self.token}"

    def shareable_text(self, base_url: str) -> str:
        return f"Send me an anonymous message!\n{self.build_url(base_url)}"

    def short_share_text(self, base_url: str) -> str:
        return f"Anonymous message: {self.build_url(base_url)}"

    def __str__(self) -> str:
        return self.token

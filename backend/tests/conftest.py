import os
import sys
import random
from datetime import datetime, timedelta, timezone

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from anonymous_message.config.settings import TestingConfig
from anonymous_message.domain.entities.answer import Answer
from anonymous_message.domain.entities.contact import Contact
from anonymous_message.domain.entities.message import Message
from anonymous_message.domain.entities.user import User
from anonymous_message.domain.value_objects.contact_id import ContactId
from anonymous_message.domain.value_objects.message_id import MessageId
from anonymous_message.domain.value_objects.personal_link import PersonalLink
from anonymous_message.domain.value_objects.user_email import UserEmail
from anonymous_message.domain.value_objects.user_id import UserId
from anonymous_message.infrastructure.memory import (
    InMemoryAuthRepository,
    InMemoryContactRepository,
    InMemoryMessageRepository,
    InMemoryUserRepository,
    InMemoryUserStore,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def make_user(username: str = "tester", email: str = "test@example.com") -> User:
    user_id = UserId.generate()
    return User(
        id=user_id,
        username=username,
        email=UserEmail(email),
        personal_link=PersonalLink.generate(user_id, random.Random(7)),
        created_at=utc_now(),
    )


def make_contact(
    owner_user_id: UserId,
    name: str = "Alex",
    days_ago: float = 0,
    linked_user_id: UserId | None = None,
    relationship: str | None = "friend",
    memo: str | None = None,
) -> Contact:
    return Contact(
        id=ContactId.generate(),
        owner_user_id=owner_user_id,
        name=name,
        registered_at=utc_now() - timedelta(days=days_ago),
        relationship=relationship,
        memo=memo,
        linked_user_id=linked_user_id,
    )


def make_message(
    sender_id: UserId,
    receiver_id: UserId,
    content: str = "Is there something you want to ask me?",
    hours_ago: float = 0,
    contact_id: ContactId | None = None,
    answered: bool = False,
) -> Message:
    message_id = MessageId.generate()
    answer = (
        Answer.create(message_id=message_id, content="Thanks for asking!")
        if answered
        else None
    )
    return Message(
        id=message_id,
        sender_id=sender_id,
        receiver_id=receiver_id,
        content=content,
        is_anonymous=True,
        sent_at=utc_now() - timedelta(hours=hours_ago),
        contact_id=contact_id,
        answer=answer,
    )


@pytest.fixture()
def user_store():
    return InMemoryUserStore(hash_iterations=TestingConfig.PASSWORD_HASH_ITERATIONS)


@pytest.fixture()
def auth_repository(user_store):
    return InMemoryAuthRepository(user_store, max_login_attempts=3)


@pytest.fixture()
def user_repository(user_store):
    return InMemoryUserRepository(user_store)


@pytest.fixture()
def contact_repository():
    return InMemoryContactRepository()


@pytest.fixture()
def message_repository():
    return InMemoryMessageRepository()


@pytest.fixture()
def owner_id():
    return UserId.generate()


@pytest.fixture()
def friend_id():
    return UserId.generate()

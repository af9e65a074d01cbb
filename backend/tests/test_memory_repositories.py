"""
Tests for the in-memory adapters: credentials, account lockout and the
single-answer guarantee under concurrent writers.
"""

import asyncio
from dataclasses import replace

import pytest

from anonymous_message.domain.entities.answer import Answer
from anonymous_message.domain.exceptions import (
    AnswerMessageError,
    AnswerMessageErrorKind,
    EntityNotFoundError,
    LoginError,
    LoginErrorKind,
    SignupError,
    SignupErrorKind,
)
from anonymous_message.domain.value_objects import ContactId, MessageId
from conftest import make_contact, make_message


class TestInMemoryAuthRepository:
    async def test_signup_signs_in_and_issues_link(self, auth_repository, user_repository):
        user = await auth_repository.signup("mina", "mina@example.com", "abcd1234")

        assert await auth_repository.is_authenticated()
        assert await auth_repository.get_current_user() == user
        assert user.personal_link.user_id == user.id
        assert user.personal_link.is_valid
        assert (
            await user_repository.fetch_user_by_personal_link(user.personal_link.token)
            == user
        )

    async def test_duplicate_email_is_case_insensitive(self, auth_repository):
        await auth_repository.signup("mina", "mina@example.com", "abcd1234")

        with pytest.raises(SignupError) as exc:
            await auth_repository.signup("other", "MINA@example.com", "abcd1234")

        assert exc.value.kind is SignupErrorKind.EMAIL_ALREADY_EXISTS

    async def test_login_logout_cycle(self, auth_repository):
        user = await auth_repository.signup("mina", "mina@example.com", "abcd1234")
        await auth_repository.logout()

        assert not await auth_repository.is_authenticated()
        assert await auth_repository.get_current_user() is None

        logged_in = await auth_repository.login("mina@example.com", "abcd1234")

        assert logged_in == user
        assert await auth_repository.is_authenticated()

    async def test_unknown_email(self, auth_repository):
        with pytest.raises(LoginError) as exc:
            await auth_repository.login("ghost@example.com", "abcd1234")

        assert exc.value.kind is LoginErrorKind.USER_NOT_FOUND

    async def test_account_locks_after_repeated_failures(self, auth_repository):
        await auth_repository.signup("mina", "mina@example.com", "abcd1234")
        await auth_repository.logout()

        for _ in range(3):
            with pytest.raises(LoginError) as exc:
                await auth_repository.login("mina@example.com", "wrong123")
            assert exc.value.kind is LoginErrorKind.INVALID_CREDENTIALS

        # Correct password no longer helps
        with pytest.raises(LoginError) as exc:
            await auth_repository.login("mina@example.com", "abcd1234")

        assert exc.value.kind is LoginErrorKind.ACCOUNT_LOCKED
        assert not await auth_repository.is_authenticated()

    async def test_successful_login_resets_failure_count(self, auth_repository):
        await auth_repository.signup("mina", "mina@example.com", "abcd1234")

        for _ in range(2):
            with pytest.raises(LoginError):
                await auth_repository.login("mina@example.com", "wrong123")
        await auth_repository.login("mina@example.com", "abcd1234")
        for _ in range(2):
            with pytest.raises(LoginError):
                await auth_repository.login("mina@example.com", "wrong123")

        assert await auth_repository.login("mina@example.com", "abcd1234")


class TestInMemoryContactRepository:
    async def test_update_unknown_contact(self, contact_repository, owner_id):
        with pytest.raises(EntityNotFoundError):
            await contact_repository.update_contact(make_contact(owner_id))

    async def test_delete_unknown_contact(self, contact_repository):
        with pytest.raises(EntityNotFoundError):
            await contact_repository.delete_contact(ContactId.generate())

    async def test_registered_at_cannot_change(self, contact_repository, owner_id):
        contact = await contact_repository.add_contact(make_contact(owner_id, days_ago=5))

        with pytest.raises(ValueError):
            await contact_repository.update_contact(
                replace(contact, registered_at=contact.registered_at.replace(year=2000))
            )


class TestInMemoryMessageRepository:
    async def test_concurrent_answers_commit_once(
        self, message_repository, owner_id, friend_id
    ):
        message = await message_repository.send_message(make_message(owner_id, friend_id))
        answers = [
            Answer.create(message_id=message.id, content=f"answer number {i}")
            for i in range(5)
        ]

        results = await asyncio.gather(
            *(message_repository.answer_message(message.id, a) for a in answers),
            return_exceptions=True,
        )

        committed = [r for r in results if not isinstance(r, Exception)]
        rejected = [r for r in results if isinstance(r, AnswerMessageError)]
        assert len(committed) == 1
        assert len(rejected) == 4
        assert all(r.kind is AnswerMessageErrorKind.ALREADY_ANSWERED for r in rejected)
        stored = await message_repository.fetch_message(message.id)
        assert stored.answer == committed[0].answer

    async def test_answer_unknown_message(self, message_repository):
        missing = MessageId.generate()

        with pytest.raises(EntityNotFoundError):
            await message_repository.answer_message(
                missing, Answer.create(message_id=missing, content="hello")
            )

    async def test_sent_and_received_are_partitioned(
        self, message_repository, owner_id, friend_id
    ):
        outgoing = await message_repository.send_message(make_message(owner_id, friend_id))
        incoming = await message_repository.send_message(make_message(friend_id, owner_id))

        assert await message_repository.fetch_sent_messages(owner_id) == [outgoing]
        assert await message_repository.fetch_received_messages(owner_id) == [incoming]

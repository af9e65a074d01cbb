"""
End-to-end flow through the dishka container: two users sign up, one adds
the other as a contact, sends an anonymous message and gets an answer.
"""

import pytest

from anonymous_message.application.commands.auth import (
    LogoutCommand,
    LogoutHandler,
    SignupCommand,
    SignupHandler,
)
from anonymous_message.application.commands.contacts import (
    AddContactCommand,
    AddContactHandler,
)
from anonymous_message.application.commands.messages import (
    AnswerMessageCommand,
    AnswerMessageHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from anonymous_message.application.dto import UserDTO
from anonymous_message.application.queries.messages import (
    FetchMessageHistoryHandler,
    FetchMessageHistoryQuery,
    ReceivedHistory,
)
from anonymous_message.application.queries.users import FetchUserProfileHandler
from anonymous_message.config.settings import Config, TestingConfig
from anonymous_message.domain.entities.message_status import MessageStatus
from anonymous_message.domain.ports.repositories import ContactRepository
from anonymous_message.setup.ioc import create_container


@pytest.fixture()
async def container():
    container = await create_container(TestingConfig)
    yield container
    await container.close()


async def signup(container, username, email):
    async with container() as request:
        handler = await request.get(SignupHandler)
        return await handler.execute(
            SignupCommand(
                username=username,
                email=email,
                password="abcd1234",
                password_confirmation="abcd1234",
            )
        )


class TestContainerFlow:
    async def test_repositories_are_shared_across_requests(self, container):
        async with container() as first:
            repo_a = await first.get(ContactRepository)
        async with container() as second:
            repo_b = await second.get(ContactRepository)

        assert repo_a is repo_b

    async def test_signup_message_and_answer(self, container):
        receiver = await signup(container, "mina", "mina@example.com")
        sender = await signup(container, "jun", "jun@example.com")

        async with container() as request:
            profiles = await request.get(FetchUserProfileHandler)
            assert (await profiles.current_user()).id == sender.id
            assert (
                await profiles.by_personal_link(receiver.personal_link.token)
            ).id == receiver.id

            contact = await (await request.get(AddContactHandler)).execute(
                AddContactCommand(
                    owner_user_id=sender.id,
                    name="Mina",
                    linked_user_id=receiver.id,
                )
            )
            message = await (await request.get(SendMessageHandler)).execute(
                SendMessageCommand(
                    sender_id=sender.id,
                    contact_id=contact.id,
                    content="What is your favourite season?",
                )
            )
            await (await request.get(LogoutHandler)).execute(LogoutCommand())

        async with container() as request:
            history = await request.get(FetchMessageHistoryHandler)
            inbox = await history.execute(
                FetchMessageHistoryQuery(receiver.id, ReceivedHistory())
            )
            assert [m.id for m in inbox] == [message.id]
            assert inbox[0].display_sender_name == "Anonymous"

            answered = await (await request.get(AnswerMessageHandler)).execute(
                AnswerMessageCommand(
                    message_id=message.id,
                    content="Autumn, definitely.",
                    answerer_id=receiver.id,
                )
            )

        assert answered.status is MessageStatus.ANSWERED
        assert answered.answer.content == "Autumn, definitely."


class ShortLinkConfig(TestingConfig):
    PERSONAL_LINK_BASE_URL = "https://msg.example.net"


class TestContainerConfig:
    async def test_user_dto_uses_injected_base_url(self):
        container = await create_container(ShortLinkConfig)
        try:
            user = await signup(container, "mina", "mina@example.com")
            config = await container.get(Config)
        finally:
            await container.close()

        dto = UserDTO.from_entity(user, base_url=config.PERSONAL_LINK_BASE_URL)

        assert isinstance(config, ShortLinkConfig)
        assert dto.personal_link_url == (
            f"https://msg.example.net/receive/{user.personal_link.token}"
        )

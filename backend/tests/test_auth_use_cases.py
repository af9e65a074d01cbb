"""
Tests for login, signup and logout.

Validation must fail before the auth repository is touched, so most tests
use an AsyncMock port and assert it was never awaited.
"""

from unittest.mock import AsyncMock

import pytest

from anonymous_message.application.commands.auth import (
    LoginCommand,
    LoginHandler,
    LogoutCommand,
    LogoutHandler,
    SignupCommand,
    SignupHandler,
)
from anonymous_message.domain.exceptions import (
    LoginError,
    LoginErrorKind,
    LogoutError,
    LogoutErrorKind,
    SignupError,
    SignupErrorKind,
)
from anonymous_message.domain.ports.repositories import AuthRepository
from conftest import make_user


@pytest.fixture()
def auth_port():
    port = AsyncMock(spec=AuthRepository)
    port.login.return_value = make_user()
    port.signup.return_value = make_user()
    return port


class TestLogin:
    @pytest.mark.parametrize(
        "email,password,kind",
        [
            ("", "secret1", LoginErrorKind.EMPTY_EMAIL),
            ("   ", "secret1", LoginErrorKind.EMPTY_EMAIL),
            ("not-an-email", "secret1", LoginErrorKind.INVALID_EMAIL_FORMAT),
            ("user@example.com", "", LoginErrorKind.EMPTY_PASSWORD),
            ("user@example.com", "12345", LoginErrorKind.PASSWORD_TOO_SHORT),
            ("user@example.com", "a", LoginErrorKind.PASSWORD_TOO_SHORT),
        ],
    )
    async def test_invalid_input_never_reaches_repository(
        self, auth_port, email, password, kind
    ):
        handler = LoginHandler(auth_port)

        with pytest.raises(LoginError) as exc:
            await handler.execute(LoginCommand(email=email, password=password))

        assert exc.value.kind is kind
        auth_port.login.assert_not_awaited()

    async def test_valid_input_delegates_to_repository(self, auth_port):
        user = await LoginHandler(auth_port).execute(
            LoginCommand(email="user@example.com", password="secret1")
        )

        assert user is auth_port.login.return_value
        auth_port.login.assert_awaited_once_with("user@example.com", "secret1")

    async def test_repository_errors_propagate_unchanged(self, auth_port):
        original = LoginError(LoginErrorKind.ACCOUNT_LOCKED)
        auth_port.login.side_effect = original

        with pytest.raises(LoginError) as exc:
            await LoginHandler(auth_port).execute(
                LoginCommand(email="user@example.com", password="secret1")
            )

        assert exc.value is original

    def test_password_hidden_from_repr(self):
        assert "secret1" not in repr(LoginCommand("user@example.com", "secret1"))


class TestSignup:
    VALID = dict(
        username="mina",
        email="mina@example.com",
        password="abcd1234",
        password_confirmation="abcd1234",
    )

    @pytest.mark.parametrize(
        "overrides,kind",
        [
            ({"username": "  "}, SignupErrorKind.EMPTY_USERNAME),
            ({"username": "m"}, SignupErrorKind.USERNAME_TOO_SHORT),
            ({"username": "m" * 21}, SignupErrorKind.USERNAME_TOO_LONG),
            ({"email": ""}, SignupErrorKind.EMPTY_EMAIL),
            ({"email": "mina@"}, SignupErrorKind.INVALID_EMAIL_FORMAT),
            ({"password": ""}, SignupErrorKind.EMPTY_PASSWORD),
            ({"password": "abc123"}, SignupErrorKind.PASSWORD_TOO_SHORT),
            ({"password": "a1" * 26}, SignupErrorKind.PASSWORD_TOO_LONG),
            ({"password": "abcdefgh"}, SignupErrorKind.WEAK_PASSWORD),
            ({"password": "12345678"}, SignupErrorKind.WEAK_PASSWORD),
            ({"password_confirmation": "abcd12345"}, SignupErrorKind.PASSWORD_MISMATCH),
        ],
    )
    async def test_each_rule(self, auth_port, overrides, kind):
        command = SignupCommand(**{**self.VALID, **overrides})

        with pytest.raises(SignupError) as exc:
            await SignupHandler(auth_port).execute(command)

        assert exc.value.kind is kind
        auth_port.signup.assert_not_awaited()

    async def test_mismatch_reported_only_after_password_rules(self, auth_port):
        # Both a weak password and a mismatch: the weak password wins
        command = SignupCommand(
            username="mina",
            email="mina@example.com",
            password="abcdefgh",
            password_confirmation="different1",
        )

        with pytest.raises(SignupError) as exc:
            await SignupHandler(auth_port).execute(command)

        assert exc.value.kind is SignupErrorKind.WEAK_PASSWORD

    async def test_username_checked_before_email(self, auth_port):
        command = SignupCommand(
            username="",
            email="bad",
            password="x",
            password_confirmation="y",
        )

        with pytest.raises(SignupError) as exc:
            await SignupHandler(auth_port).execute(command)

        assert exc.value.kind is SignupErrorKind.EMPTY_USERNAME

    async def test_valid_signup_delegates(self, auth_port):
        await SignupHandler(auth_port).execute(SignupCommand(**self.VALID))

        auth_port.signup.assert_awaited_once_with(
            username="mina", email="mina@example.com", password="abcd1234"
        )

    async def test_padded_username_counts_spaces(self, auth_port):
        command = SignupCommand(**{**self.VALID, "username": " a "})

        await SignupHandler(auth_port).execute(command)

        auth_port.signup.assert_awaited_once_with(
            username=" a ", email="mina@example.com", password="abcd1234"
        )

    async def test_padding_can_push_username_over_limit(self, auth_port):
        command = SignupCommand(**{**self.VALID, "username": "m" * 19 + "   "})

        with pytest.raises(SignupError) as exc:
            await SignupHandler(auth_port).execute(command)

        assert exc.value.kind is SignupErrorKind.USERNAME_TOO_LONG
        auth_port.signup.assert_not_awaited()


class TestLogout:
    async def test_not_authenticated(self, auth_port):
        auth_port.is_authenticated.return_value = False

        with pytest.raises(LogoutError) as exc:
            await LogoutHandler(auth_port).execute(LogoutCommand())

        assert exc.value.kind is LogoutErrorKind.NOT_AUTHENTICATED
        auth_port.logout.assert_not_awaited()

    async def test_authenticated_user_is_signed_out(self, auth_port):
        auth_port.is_authenticated.return_value = True

        await LogoutHandler(auth_port).execute(LogoutCommand())

        auth_port.logout.assert_awaited_once()

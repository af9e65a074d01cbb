"""Authentication commands."""

from .login import LoginCommand, LoginHandler
from .logout import LogoutCommand, LogoutHandler
from .signup import SignupCommand, SignupHandler

__all__ = [
    "LoginCommand",
    "LoginHandler",
    "LogoutCommand",
    "LogoutHandler",
    "SignupCommand",
    "SignupHandler",
]

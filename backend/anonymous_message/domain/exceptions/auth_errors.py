"""
Authentication errors - login, signup and logout failures.
"""

from enum import Enum

from anonymous_message.domain.exceptions.domain_error import DomainError


class LoginErrorKind(str, Enum):
    EMPTY_EMAIL = "empty_email"
    INVALID_EMAIL_FORMAT = "invalid_email_format"
    EMPTY_PASSWORD = "empty_password"
    PASSWORD_TOO_SHORT = "password_too_short"
    INVALID_CREDENTIALS = "invalid_credentials"
    USER_NOT_FOUND = "user_not_found"
    ACCOUNT_LOCKED = "account_locked"


class LoginError(DomainError):
    messages = {
        LoginErrorKind.EMPTY_EMAIL: "Please enter your email.",
        LoginErrorKind.INVALID_EMAIL_FORMAT: "The email format is not valid.",
        LoginErrorKind.EMPTY_PASSWORD: "Please enter your password.",
        LoginErrorKind.PASSWORD_TOO_SHORT: "Password must be at least 6 characters.",
        LoginErrorKind.INVALID_CREDENTIALS: "Email or password is incorrect.",
        LoginErrorKind.USER_NOT_FOUND: "No account is registered with this email.",
        LoginErrorKind.ACCOUNT_LOCKED: "This account is locked. Please contact support.",
    }


class SignupErrorKind(str, Enum):
    EMPTY_USERNAME = "empty_username"
    USERNAME_TOO_SHORT = "username_too_short"
    USERNAME_TOO_LONG = "username_too_long"
    EMPTY_EMAIL = "empty_email"
    INVALID_EMAIL_FORMAT = "invalid_email_format"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    EMPTY_PASSWORD = "empty_password"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    WEAK_PASSWORD = "weak_password"
    PASSWORD_MISMATCH = "password_mismatch"


class SignupError(DomainError):
    messages = {
        SignupErrorKind.EMPTY_USERNAME: "Please enter a username.",
        SignupErrorKind.USERNAME_TOO_SHORT: "Username must be at least 2 characters.",
        SignupErrorKind.USERNAME_TOO_LONG: "Username can be at most 20 characters.",
        SignupErrorKind.EMPTY_EMAIL: "Please enter your email.",
        SignupErrorKind.INVALID_EMAIL_FORMAT: "The email format is not valid.",
        SignupErrorKind.EMAIL_ALREADY_EXISTS: "This email is already in use.",
        SignupErrorKind.EMPTY_PASSWORD: "Please enter a password.",
        SignupErrorKind.PASSWORD_TOO_SHORT: "Password must be at least 8 characters.",
        SignupErrorKind.PASSWORD_TOO_LONG: "Password can be at most 50 characters.",
        SignupErrorKind.WEAK_PASSWORD: "Password must contain letters and digits.",
        SignupErrorKind.PASSWORD_MISMATCH: "Passwords do not match.",
    }


class LogoutErrorKind(str, Enum):
    NOT_AUTHENTICATED = "not_authenticated"


class LogoutError(DomainError):
    messages = {
        LogoutErrorKind.NOT_AUTHENTICATED: "You are not logged in.",
    }

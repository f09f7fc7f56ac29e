"""Authentication errors.

Every error raised by ``sign_in`` is an ``AuthError``; ``type`` tells the
failure categories apart.
"""
from typing import Optional


class AuthError(Exception):
    """Base class for sign-in failures."""

    type: str = "AuthError"

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message or self.type)
        self.cause = cause


class CredentialsSignin(AuthError):
    """The submitted email and password did not match a user."""
    type = "CredentialsSignin"


class InvalidProvider(AuthError):
    """No provider is registered under the requested name."""
    type = "InvalidProvider"


class CallbackRouteError(AuthError):
    """The provider failed while checking credentials."""
    type = "CallbackRouteError"

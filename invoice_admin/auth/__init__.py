"""Authentication: credentials provider and session helpers."""
from .errors import AuthError, CallbackRouteError, CredentialsSignin, InvalidProvider
from .providers import Credentials, CredentialsProvider, hash_password, verify_password
from .core import sign_in, sign_out, get_session_user

__all__ = [
    "AuthError",
    "CallbackRouteError",
    "CredentialsSignin",
    "InvalidProvider",
    "Credentials",
    "CredentialsProvider",
    "hash_password",
    "verify_password",
    "sign_in",
    "sign_out",
    "get_session_user",
]

"""Sign-in and sign-out against the signed session cookie."""
from typing import Any, Mapping, MutableMapping, Optional

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from .errors import AuthError, CallbackRouteError, CredentialsSignin, InvalidProvider
from .providers import CredentialsProvider
from ..schemas.response import SessionUser
from ..utils.logger import get_logger

logger = get_logger("auth")

SESSION_USER_KEY = "user"

PROVIDERS = {
    CredentialsProvider.name: CredentialsProvider(),
}


async def sign_in(
    provider_name: str,
    form_data: Mapping[str, Any],
    db: Session,
    session: MutableMapping[str, Any],
) -> SessionUser:
    """
    Verify credentials with a provider and start a session.

    Args:
        provider_name: Registered provider, e.g. "credentials"
        form_data: Raw sign-in form fields
        db: Database session
        session: Request session the user is stored in

    Returns:
        The signed-in user

    Raises:
        InvalidProvider: Unknown provider name
        CredentialsSignin: Credentials did not match a user
        CallbackRouteError: The provider failed unexpectedly
    """
    provider = PROVIDERS.get(provider_name)
    if provider is None:
        raise InvalidProvider(f"Unknown provider: {provider_name}")

    try:
        # Password hashing runs in a worker thread
        user = await run_in_threadpool(provider.authorize, form_data, db)
    except AuthError:
        raise
    except Exception as e:
        logger.error(f"Provider {provider_name} failed: {e}", exc_info=True)
        raise CallbackRouteError(str(e), cause=e) from e

    if user is None:
        raise CredentialsSignin()

    session_user = SessionUser(id=user.id, name=user.name, email=user.email)
    session[SESSION_USER_KEY] = session_user.model_dump()
    logger.info("User signed in", extra={"extra": {"user_id": user.id}})
    return session_user


def sign_out(session: MutableMapping[str, Any]) -> None:
    """End the current session."""
    session.pop(SESSION_USER_KEY, None)


def get_session_user(session: Mapping[str, Any]) -> Optional[SessionUser]:
    """Return the signed-in user stored in ``session``, if any."""
    data = session.get(SESSION_USER_KEY)
    if not data:
        return None
    return SessionUser.model_validate(data)

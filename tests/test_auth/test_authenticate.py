"""Tests for sign-in and the authenticate action."""
import threading
from unittest.mock import patch

import pytest

from invoice_admin.actions import authenticate
from invoice_admin.auth import (
    CallbackRouteError,
    CredentialsProvider,
    CredentialsSignin,
    InvalidProvider,
    get_session_user,
    sign_in,
    sign_out,
    verify_password,
)

DEMO_EMAIL = "user@nextmail.com"
DEMO_PASSWORD = "123456"


@pytest.mark.asyncio
async def test_authenticate_success(db, user):
    """Test valid credentials store the user in the session."""
    session = {}

    message = await authenticate(None, {"email": DEMO_EMAIL, "password": DEMO_PASSWORD}, db, session)

    assert message is None
    assert get_session_user(session).email == DEMO_EMAIL


@pytest.mark.asyncio
@pytest.mark.parametrize("form", [
    {"email": DEMO_EMAIL, "password": "wrong-password"},
    {"email": "nobody@nextmail.com", "password": DEMO_PASSWORD},
    {"email": "not-an-email", "password": DEMO_PASSWORD},
    {"email": DEMO_EMAIL, "password": "123"},
    {},
])
async def test_authenticate_invalid_credentials(db, user, form):
    """Test every credential failure reads as invalid credentials."""
    session = {}

    message = await authenticate(None, form, db, session)

    assert message == "Invalid credentials."
    assert get_session_user(session) is None


@pytest.mark.asyncio
async def test_authenticate_provider_failure(db, user):
    """Test other auth errors map to a generic message."""
    with patch.object(CredentialsProvider, "authorize", side_effect=RuntimeError("db down")):
        message = await authenticate(None, {"email": DEMO_EMAIL, "password": DEMO_PASSWORD}, db, {})

    assert message == "Something went wrong."


@pytest.mark.asyncio
async def test_authenticate_reraises_unknown_errors(db):
    """Test errors that aren't auth errors propagate."""
    with patch("invoice_admin.actions.auth.sign_in", side_effect=ValueError("boom")):
        with pytest.raises(ValueError):
            await authenticate(None, {}, db, {})


@pytest.mark.asyncio
async def test_sign_in_error_types(db, user):
    with pytest.raises(InvalidProvider) as exc:
        await sign_in("github", {}, db, {})
    assert exc.value.type == "InvalidProvider"

    with pytest.raises(CredentialsSignin) as exc:
        await sign_in("credentials", {"email": DEMO_EMAIL, "password": "nope-nope"}, db, {})
    assert exc.value.type == "CredentialsSignin"

    with patch.object(CredentialsProvider, "authorize", side_effect=RuntimeError("db down")):
        with pytest.raises(CallbackRouteError) as exc:
            await sign_in("credentials", {}, db, {})
    assert isinstance(exc.value.cause, RuntimeError)


@pytest.mark.asyncio
async def test_sign_out(db, user):
    session = {}
    await sign_in("credentials", {"email": DEMO_EMAIL, "password": DEMO_PASSWORD}, db, session)

    sign_out(session)

    assert get_session_user(session) is None


@pytest.mark.asyncio
async def test_password_check_runs_off_event_loop(db, user):
    """Test credential verification happens in a worker thread."""
    threads = []

    def _record(password, hashed):
        threads.append(threading.get_ident())
        return verify_password(password, hashed)

    with patch("invoice_admin.auth.providers.verify_password", side_effect=_record):
        await sign_in("credentials", {"email": DEMO_EMAIL, "password": DEMO_PASSWORD}, db, {})

    assert len(threads) == 1
    assert threads[0] != threading.get_ident()

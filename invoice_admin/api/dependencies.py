"""FastAPI dependencies for dependency injection."""
from fastapi import Request

from ..auth import get_session_user
from ..db.session import get_db_session
from ..schemas.response import SessionUser
from ..services.page_cache import PageCache, get_page_cache


class NotAuthenticated(Exception):
    """Raised when a dashboard route is requested without a session."""

    def __init__(self, path: str):
        super().__init__(f"Sign-in required for {path}")
        self.path = path


def require_user(request: Request) -> SessionUser:
    """
    Get the signed-in user or stop the request.

    Raises:
        NotAuthenticated: No user in the session; the app redirects to
            the login page.
    """
    user = get_session_user(request.session)
    if user is None:
        raise NotAuthenticated(request.url.path)
    return user


def get_cache() -> PageCache:
    """Get the page cache dependency."""
    return get_page_cache()


__all__ = ["NotAuthenticated", "require_user", "get_cache", "get_db_session"]

"""FastAPI main application entry point."""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from .config.settings import settings
from .db.session import init_db
from .api.dependencies import NotAuthenticated
from .api.routes import auth, health, invoices
from .services.page_cache import get_page_cache
from .utils.logger import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Invoice Admin API")
    init_db()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down Invoice Admin API")
    get_page_cache().close()


async def _redirect_to_login(request: Request, exc: NotAuthenticated) -> RedirectResponse:
    logger.info(f"Redirecting anonymous request for {exc.path} to login")
    return RedirectResponse(url=settings.LOGIN_PATH, status_code=303)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""
        Invoice Admin API

        Form actions behind the invoice dashboard:
        - create, edit and delete invoices
        - cached invoice listing, invalidated on every change
        - email and password sign-in with a signed session cookie
        """,
        lifespan=lifespan,
    )

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SECRET_KEY,
        session_cookie=settings.SESSION_COOKIE,
        same_site="lax",
    )

    app.add_exception_handler(NotAuthenticated, _redirect_to_login)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(invoices.router)

    return app


app = create_app()

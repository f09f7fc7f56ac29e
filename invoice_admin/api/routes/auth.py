"""Sign-in and sign-out endpoints."""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from ...actions import authenticate
from ...auth import get_session_user, sign_out
from ...config.settings import settings
from ...schemas.response import SignInResponse
from ..dependencies import get_db_session

router = APIRouter(tags=["Auth"])


def _safe_redirect(target: object) -> str:
    # Only same-site paths are honoured
    if isinstance(target, str) and target.startswith("/") and not target.startswith("//"):
        return target
    return settings.SIGN_IN_REDIRECT_PATH


@router.get(settings.LOGIN_PATH, response_model=SignInResponse)
async def login_form(request: Request):
    """Login page; signed-in users are sent to the dashboard."""
    if get_session_user(request.session):
        return RedirectResponse(url=settings.SIGN_IN_REDIRECT_PATH, status_code=303)
    return SignInResponse()


@router.post(settings.LOGIN_PATH)
async def login(request: Request, db: Session = Depends(get_db_session)) -> Response:
    """Handle the login form."""
    form = dict(await request.form())
    message = await authenticate(None, form, db, request.session)
    if message:
        return JSONResponse(status_code=401, content=SignInResponse(message=message).model_dump())

    return RedirectResponse(url=_safe_redirect(form.get("redirectTo")), status_code=303)


@router.post("/logout")
async def logout(request: Request) -> Response:
    """End the session and return to the login page."""
    sign_out(request.session)
    return RedirectResponse(url=settings.LOGIN_PATH, status_code=303)

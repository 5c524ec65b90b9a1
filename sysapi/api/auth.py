"""Session login/logout endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from sysapi.api.deps import SettingsDep, UserServiceDep
from sysapi.core.exceptions import BusinessError, ErrorCode
from sysapi.core.security import create_session_token

logger = logging.getLogger(__name__)

router = APIRouter()

BAD_CREDENTIALS_MESSAGE = "Invalid username or password."

LOGIN_FORM = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Login</title></head>
<body>
<form method="post" action="/login">
  <label>Username <input name="username" autocomplete="username"></label>
  <label>Password <input name="password" type="password" autocomplete="current-password"></label>
  <button type="submit">Login</button>
</form>
</body>
</html>
"""


def _safe_redirect_target(uri: str | None) -> str:
    # Only same-site absolute paths; anything else falls back to "/".
    if not uri or not uri.startswith("/") or uri.startswith("//"):
        return "/"
    return uri


@router.get("/login", response_class=HTMLResponse)
def login_page() -> str:
    """Login form posting username/password to POST /login."""
    return LOGIN_FORM


@router.post("/login")
def login(
    request: Request,
    username: Annotated[str, Form()],
    password: Annotated[str, Form()],
    service: UserServiceDep,
    settings: SettingsDep,
) -> RedirectResponse:
    """
    Verify credentials, issue the session cookie and redirect to the page that
    triggered the login (or "/"). Unknown user and wrong password give the same
    412 business error.
    """
    user = service.login(username, password)
    if user is None:
        logger.info("Failed login attempt")
        raise BusinessError(ErrorCode.BAD_CREDENTIALS, BAD_CREDENTIALS_MESSAGE)

    target = _safe_redirect_target(request.cookies.get(settings.ORIGINAL_URI_COOKIE_NAME))
    response = RedirectResponse(url=target, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        create_session_token(user.username, frozenset(), settings),
        max_age=settings.SESSION_MAX_AGE_MINUTES * 60,
        path="/",
        httponly=True,
        samesite="lax",
    )
    response.delete_cookie(settings.ORIGINAL_URI_COOKIE_NAME, path="/")
    logger.info("User %s logged in", user.username)
    return response


@router.get("/logout")
def logout(settings: SettingsDep) -> RedirectResponse:
    """Clear the session cookie and go back to the login page."""
    response = RedirectResponse(url="/login", status_code=status.HTTP_302_FOUND)
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")
    return response

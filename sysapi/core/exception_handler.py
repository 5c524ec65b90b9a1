"""
Central translation of raised errors into HTTP responses.

Every error surfaced by a route reaches handle_exception exactly once.
to_error_response holds the status/body mapping and is free of HTTP plumbing
so it can be tested on its own.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from sysapi.core.config import Settings
from sysapi.core.exceptions import (
    BusinessError,
    ForbiddenError,
    InvalidInputError,
    LoginRequiredError,
    NotFoundError,
    SysApiError,
)
from sysapi.core.json_codec import CodecJSONResponse
from sysapi.schemas.error import ExceptionResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Error"
LOGIN_PATH = "/login"


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "Invalid value")
    return f"{loc}: {msg}" if loc else msg


def to_error_response(exc: BaseException, development: bool) -> tuple[int, ExceptionResponse]:
    """Map an exception to (HTTP status, body)."""
    if isinstance(exc, BusinessError):
        return (
            status.HTTP_412_PRECONDITION_FAILED,
            ExceptionResponse(code=exc.code, message=exc.message),
        )
    if isinstance(exc, NotFoundError):
        return (
            status.HTTP_404_NOT_FOUND,
            ExceptionResponse(code=status.HTTP_404_NOT_FOUND, message=exc.message),
        )
    if isinstance(exc, ForbiddenError):
        return (
            status.HTTP_403_FORBIDDEN,
            ExceptionResponse(code=status.HTTP_403_FORBIDDEN, message=exc.message),
        )
    if isinstance(exc, StarletteHTTPException):
        return (
            exc.status_code,
            ExceptionResponse(code=exc.status_code, message=str(exc.detail)),
        )
    if isinstance(exc, RequestValidationError):
        return (
            status.HTTP_400_BAD_REQUEST,
            ExceptionResponse(code=status.HTTP_400_BAD_REQUEST, message=_validation_message(exc)),
        )
    if isinstance(exc, (InvalidInputError, ValueError)):
        message = exc.message if isinstance(exc, SysApiError) else (str(exc) or type(exc).__name__)
        return (
            status.HTTP_400_BAD_REQUEST,
            ExceptionResponse(code=status.HTTP_400_BAD_REQUEST, message=message),
        )
    if development:
        message = str(exc) or type(exc).__name__
    else:
        message = INTERNAL_ERROR_MESSAGE
    return (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ExceptionResponse(code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=message),
    )


def _login_redirect(exc: LoginRequiredError, settings: Settings) -> Response:
    response = RedirectResponse(url=LOGIN_PATH, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        settings.ORIGINAL_URI_COOKIE_NAME,
        exc.original_uri,
        path="/",
        httponly=True,
        samesite="lax",
    )
    return response


async def handle_exception(request: Request, exc: Exception) -> Response:
    """Single interception point registered for every error type."""
    settings: Settings = request.app.state.settings
    if isinstance(exc, LoginRequiredError):
        logger.info("Login required for %s; redirecting", exc.original_uri)
        return _login_redirect(exc, settings)

    status_code, body = to_error_response(exc, settings.development_mode)
    if status_code >= 500:
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    else:
        logger.info(
            "%s %s -> %s: %s", request.method, request.url.path, status_code, body.message
        )
    headers = exc.headers if isinstance(exc, StarletteHTTPException) else None
    return CodecJSONResponse(content=body, status_code=status_code, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Route every error type through handle_exception."""
    app.add_exception_handler(SysApiError, handle_exception)
    app.add_exception_handler(StarletteHTTPException, handle_exception)
    app.add_exception_handler(RequestValidationError, handle_exception)
    app.add_exception_handler(ValueError, handle_exception)
    # Exception is served by Starlette's outermost error middleware.
    app.add_exception_handler(Exception, handle_exception)

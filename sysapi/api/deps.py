"""Request-scoped dependencies: settings, repositories and the session gate."""

import logging
from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from sysapi.core.config import Settings
from sysapi.core.database import get_db
from sysapi.core.exceptions import ForbiddenError, LoginRequiredError
from sysapi.core.security import decode_session_token
from sysapi.schemas.auth import UserSession
from sysapi.services import ResourceService, UserService

logger = logging.getLogger(__name__)

ANONYMOUS_SESSION = UserSession(name="anonymous")


def get_app_settings(request: Request) -> Settings:
    """Settings the application was built with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_user_service(db: Annotated[Session, Depends(get_db)]) -> UserService:
    return UserService(db)


def get_resource_service(db: Annotated[Session, Depends(get_db)]) -> ResourceService:
    return ResourceService(db)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ResourceServiceDep = Annotated[ResourceService, Depends(get_resource_service)]


def _original_uri(request: Request) -> str:
    uri = request.url.path
    if request.url.query:
        uri = f"{uri}?{request.url.query}"
    return uri


def get_current_session(request: Request, settings: SettingsDep) -> UserSession:
    """
    Dependency: require a valid session cookie and return its principal.

    Raises LoginRequiredError (redirect to /login) if missing, expired or forged.
    """
    if not settings.AUTH_ENABLED:
        return ANONYMOUS_SESSION
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise LoginRequiredError(_original_uri(request))
    try:
        payload = decode_session_token(token, settings)
    except jwt.PyJWTError:
        logger.info("Rejected invalid or expired session cookie")
        raise LoginRequiredError(_original_uri(request))
    sub = payload.get("sub")
    if not sub:
        raise LoginRequiredError(_original_uri(request))
    return UserSession(name=sub, roles=frozenset(payload.get("roles") or ()))


CurrentSession = Annotated[UserSession, Depends(get_current_session)]


def require_roles(*roles: str) -> Callable[..., UserSession]:
    """
    Build a gate that requires a session holding any of roles.

    Unless ENFORCE_ROLES is set the gate only authenticates and logs the check.
    """
    required = frozenset(roles)

    def gate(session: CurrentSession, settings: SettingsDep) -> UserSession:
        if required and not (required & session.roles):
            if settings.ENFORCE_ROLES:
                raise ForbiddenError(f"One of roles {sorted(required)} is required")
            logger.debug(
                "Role check skipped for %s (requires %s)", session.name, sorted(required)
            )
        return session

    return gate

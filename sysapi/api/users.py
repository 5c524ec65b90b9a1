"""CRUD endpoints for system users."""

from typing import Annotated

from fastapi import APIRouter, Depends

from sysapi.api.deps import UserServiceDep, require_roles
from sysapi.core.exceptions import InvalidInputError, NotFoundError
from sysapi.core.json_codec import convert_object
from sysapi.core.validation import parse_id
from sysapi.schemas.auth import UserSession
from sysapi.schemas.user import UserCreate, UserDetail, UserListItem, UserUpdate

router = APIRouter()


@router.get("", response_model=list[UserListItem], response_model_exclude_none=True)
def list_users(
    _session: Annotated[UserSession, Depends(require_roles("1"))],
    service: UserServiceDep,
) -> list[UserListItem]:
    """List all users (id, username, email, lastLogin), requires a session."""
    return service.list()


@router.get("/{id}", response_model=UserDetail, response_model_exclude_none=True)
def get_user(id: str, service: UserServiceDep) -> UserDetail:
    """Return one user without its password hash; 404 if absent."""
    user_id = parse_id(id)
    user = service.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return convert_object(user, UserDetail)


@router.post("", response_model=int)
def create_user(body: UserCreate, service: UserServiceDep) -> int:
    """Create a user; the body is the new id."""
    return service.save(body)


@router.put("", response_model=int)
def update_user(body: UserUpdate, service: UserServiceDep) -> int:
    """Overwrite every mutable field; the body is the affected row count."""
    return service.modify(body)


@router.delete("", response_model=int)
def delete_user_without_id() -> int:
    """A delete without an id is a bad request, not a bulk delete."""
    raise InvalidInputError("Missing id")


@router.delete("/{id}", response_model=int)
def delete_user(id: str, service: UserServiceDep) -> int:
    """Delete by id; the body is the affected row count (0 when absent)."""
    return service.delete(parse_id(id))

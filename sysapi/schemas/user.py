"""Request/response records for system users."""

from datetime import datetime

from pydantic import Field

from sysapi.core.validation import MAX_ID
from sysapi.schemas.base import Record


class UserRecord(Record):
    """Full user row as stored; password is the stored hash."""

    id: int | None = None
    username: str
    email: str | None = None
    password: str | None = None
    is_active: int | None = None
    created_at: datetime | None = None
    last_login: datetime | None = None


class UserCreate(Record):
    """Body of POST /user. id, createdAt and lastLogin are assigned by the server."""

    username: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)
    is_active: int = 1


class UserUpdate(Record):
    """Body of PUT /user; every mutable field is overwritten."""

    id: int = Field(..., ge=1, le=MAX_ID)
    username: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)
    last_login: datetime | None = None


class UserDetail(Record):
    """GET /user/{id} response: the full row without the password hash."""

    id: int
    username: str
    email: str | None = None
    is_active: int | None = None
    created_at: datetime | None = None
    last_login: datetime | None = None


class UserListItem(Record):
    """GET /user response entry: id, username, email and lastLogin only."""

    id: int
    username: str
    email: str | None = None
    last_login: datetime | None = None

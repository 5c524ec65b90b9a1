"""Pydantic request/response schemas."""

from sysapi.schemas.auth import UserSession
from sysapi.schemas.error import ExceptionResponse
from sysapi.schemas.health import LivenessResponse, ReadinessResponse
from sysapi.schemas.resource import ResourceCreate, ResourceRecord, ResourceUpdate
from sysapi.schemas.user import (
    UserCreate,
    UserDetail,
    UserListItem,
    UserRecord,
    UserUpdate,
)

__all__ = [
    "ExceptionResponse",
    "LivenessResponse",
    "ReadinessResponse",
    "ResourceCreate",
    "ResourceRecord",
    "ResourceUpdate",
    "UserCreate",
    "UserDetail",
    "UserListItem",
    "UserRecord",
    "UserSession",
    "UserUpdate",
]

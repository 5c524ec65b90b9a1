"""Request/response records for resources."""

from pydantic import Field

from sysapi.core.validation import MAX_ID
from sysapi.schemas.base import Record


class ResourceRecord(Record):
    """Resource row; parentId links to another resource (tree)."""

    id: int
    name: str
    type: int
    permission: str
    parent_id: int | None = None
    icon: str
    url: str


class ResourceCreate(Record):
    name: str = Field(..., min_length=1, max_length=255)
    type: int = 0
    permission: str = Field(default="", max_length=255)
    parent_id: int | None = Field(default=None, ge=1, le=MAX_ID)
    icon: str = Field(default="", max_length=255)
    url: str = Field(default="", max_length=1024)


class ResourceUpdate(ResourceCreate):
    id: int = Field(..., ge=1, le=MAX_ID)

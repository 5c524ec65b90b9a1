"""Session principal carried by the session cookie."""

from pydantic import BaseModel, Field


class UserSession(BaseModel):
    """Logged-in identity: username plus role set (empty on login)."""

    name: str = Field(..., description="Username")
    roles: frozenset[str] = Field(default_factory=frozenset)

"""Error response body."""

from pydantic import BaseModel, Field


class ExceptionResponse(BaseModel):
    """Body of every error response; code is omitted when None."""

    code: int | None = Field(default=None, description="HTTP status or business code")
    message: str = Field(..., description="Human-readable cause")

"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class LivenessResponse(BaseModel):
    status: Literal["OK"] = "OK"


class ReadinessResponse(BaseModel):
    """Readiness reports the result of a live database probe."""

    status: Literal["OK", "DOWN"] = Field(description="Overall readiness")
    db: Literal["OK", "DOWN"] = Field(description="Database probe result")

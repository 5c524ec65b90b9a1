"""Liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from sysapi.core.database import Database, get_database
from sysapi.schemas.health import LivenessResponse, ReadinessResponse

router = APIRouter()


@router.get("/liveness", response_model=LivenessResponse)
def liveness() -> LivenessResponse:
    """The process is up and serving requests."""
    return LivenessResponse()


@router.get("/readiness", response_model=ReadinessResponse)
def readiness(
    response: Response,
    database: Annotated[Database, Depends(get_database)],
) -> ReadinessResponse:
    """
    Probe the database with SELECT 1.
    Returns 503 with db=DOWN when the store is unreachable.
    """
    if database.check_connected():
        return ReadinessResponse(status="OK", db="OK")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="DOWN", db="DOWN")

"""HTTP routers."""

from fastapi import APIRouter

from sysapi.api import auth, health, resources, users


def build_router(sys_prefix: str) -> APIRouter:
    """All routes; entity routes live under sys_prefix (e.g. /sys/user)."""
    router = APIRouter()
    router.include_router(auth.router, tags=["auth"])
    router.include_router(health.router, prefix="/health", tags=["health"])
    router.include_router(users.router, prefix=f"{sys_prefix}/user", tags=["user"])
    router.include_router(resources.router, prefix=f"{sys_prefix}/resource", tags=["resource"])
    return router

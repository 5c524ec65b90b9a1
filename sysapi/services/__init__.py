"""Entity repositories."""

from sysapi.services.resource_service import ResourceService
from sysapi.services.user_service import UserService

__all__ = ["ResourceService", "UserService"]

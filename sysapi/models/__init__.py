"""SQLAlchemy ORM models."""

from sysapi.models.base import Base
from sysapi.models.resource import Resource
from sysapi.models.user import User

__all__ = ["Base", "Resource", "User"]

"""Core configuration, database lifecycle, errors and codecs."""

from sysapi.core.config import Settings, get_settings
from sysapi.core.database import Database, get_db

__all__ = ["Database", "Settings", "get_db", "get_settings"]

"""Core app configuration, database, errors and tokens."""

from fullbright.core.config import Settings, get_settings
from fullbright.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]

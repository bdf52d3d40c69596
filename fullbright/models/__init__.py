"""SQLAlchemy ORM models."""

from fullbright.models.base import Base
from fullbright.models.user import User

__all__ = ["Base", "User"]

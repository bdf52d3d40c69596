"""ORM model for API users (HWID-bound accounts)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, false, func

from fullbright.models.base import Base


class User(Base):
    """
    Account created on first registration (or login, when auto-register is on).

    hwid: hardware id bound at creation or at the first login that supplies one.
    role: free-form string, 'USER' by default; admins may overwrite it (e.g. 'VIP').
    token: last token issued; for the 'stored' scheme this is the account's only token.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    hwid = Column(String(255), nullable=True)
    role = Column(String(32), nullable=False, default="USER", server_default="USER")
    banned = Column(Boolean, nullable=False, default=False, server_default=false())
    token = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    last_login = Column(DateTime(timezone=True), nullable=True)
    last_ip = Column(String(64), nullable=True)

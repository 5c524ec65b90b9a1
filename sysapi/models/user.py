"""ORM model for system users."""

from sqlalchemy import Column, DateTime, Integer, String

from sysapi.models.base import Base


class User(Base):
    """
    System user account.

    username is unique; password holds a bcrypt hash, never plain text.
    created_at is set once on insert; last_login is updated on successful login.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True)
    password = Column(String(255), nullable=False)
    is_active = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False)
    last_login = Column(DateTime(timezone=True), nullable=True)

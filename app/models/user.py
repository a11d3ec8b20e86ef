"""ORM model for registered user accounts."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, false, func
from sqlalchemy.orm import relationship

from app.models.base import Base

# status value that blocks login; any other value is treated as active.
STATUS_ACTIVE = "active"
STATUS_DISABLED = "disable"


class User(Base):
    """
    Registered account. Plain record: lookups and writes live in UserRepository.

    deleted_at non-null means soft-deleted; the row is kept but login is refused.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=True)
    email = Column(String(254), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    status = Column(String(32), nullable=False, default=STATUS_ACTIVE, server_default=STATUS_ACTIVE)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=True,
        server_default=func.now(),
        onupdate=func.now(),
    )
    deleted_at = Column(DateTime(timezone=True), nullable=True, default=None)

    access_tokens = relationship(
        "AccessToken",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

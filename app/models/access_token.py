"""ORM model for issued access tokens (one row per live bearer token)."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class AccessToken(Base):
    """
    Issued bearer token. id is the opaque identifier (the JWT jti); the token
    value itself is only stored as a SHA-256 digest. Deleting the row revokes it.
    """

    __tablename__ = "access_tokens"

    id = Column(String(32), primary_key=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token_hash = Column(String(64), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    last_used_at = Column(DateTime(timezone=True), nullable=True)
    expires_at = Column(DateTime(timezone=True), nullable=True, index=True)

    user = relationship("User", back_populates="access_tokens")

"""SQLAlchemy declarative Base shared by the users and access_tokens tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models; Base.metadata feeds Alembic autogenerate."""

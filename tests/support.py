"""Shared fixtures: in-memory SQLite database with the full schema."""

import unittest
from datetime import UTC, datetime
from unittest.mock import patch

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.models import Base, User
from app.models.user import STATUS_DISABLED

PASSWORD = "longenough1"


def make_session_factory() -> sessionmaker:
    """One shared in-memory connection so every session sees the same tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def make_settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)


class DatabaseTestCase(unittest.TestCase):
    """Fresh database per test; bcrypt cost lowered so hashing stays fast."""

    def setUp(self) -> None:
        rounds = patch("app.core.security.BCRYPT_ROUNDS", 4)
        rounds.start()
        self.addCleanup(rounds.stop)
        self.session_factory = make_session_factory()
        self.db: Session = self.session_factory()
        self.addCleanup(self.db.close)
        self.settings = make_settings()

    def set_user_state(
        self,
        email: str,
        *,
        disabled: bool = False,
        deleted: bool = False,
        admin: bool = False,
    ) -> None:
        user = self.db.query(User).filter(User.email == email).one()
        if disabled:
            user.status = STATUS_DISABLED
        if deleted:
            user.deleted_at = datetime.now(UTC)
        if admin:
            user.is_admin = True
        self.db.commit()

"""Lookups and writes for User records."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import InvalidCredentials
from app.core.security import dummy_password_hash, hash_password, verify_password
from app.models.user import STATUS_ACTIVE, User


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, user_id: int) -> User | None:
        """Retrieves a User by primary key."""
        return self.session.get(User, user_id)

    def find_by_email(self, email: str) -> User | None:
        """Retrieves a User by their unique email (login ID)."""
        stmt = select(User).where(User.email == email)
        return self.session.scalars(stmt).first()

    def list_all(self) -> list[User]:
        return list(self.session.scalars(select(User).order_by(User.id)))

    def create(
        self,
        email: str,
        password: str,
        name: str | None = None,
        is_admin: bool = False,
    ) -> User:
        """
        Hashes the password and adds a new active User. Flushes so the id and
        the unique index are checked now; the caller owns the commit.
        """
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            status=STATUS_ACTIVE,
            is_admin=is_admin,
        )
        self.session.add(user)
        self.session.flush()
        self.session.refresh(user)
        return user

    def verify_credentials(self, email: str, password: str) -> User:
        """
        Return the User whose email and password match, else raise InvalidCredentials.

        Account state (disabled, soft-deleted) is not checked here.
        """
        user = self.find_by_email(email)
        if user is None:
            verify_password(password, dummy_password_hash())
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            raise InvalidCredentials()
        return user

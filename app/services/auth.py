"""Registration, login and logout: credential checks and token lifecycle."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import (
    AccountDisabled,
    AccountNotFound,
    AdminRequired,
    DuplicateEmail,
    RegistrationFailed,
    TokenMissing,
)
from app.models.user import STATUS_DISABLED, User
from app.repositories.users import UserRepository
from app.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, UserOut
from app.services.tokens import TokenService

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class AuthService:
    """
    Orchestrates the user repository and the token service within one DB session.

    Commits on success and rolls back on failure; repositories only flush.
    """

    def __init__(self, session: Session, settings: "Settings"):
        self.session = session
        self.users = UserRepository(session)
        self.tokens = TokenService(session, settings)

    def register(self, data: RegisterRequest, is_admin: bool = False) -> User:
        """
        Create an active user; is_admin is only set by the create_user CLI.
        Raises DuplicateEmail when the email is taken (checked up front and again
        via the unique index), RegistrationFailed for any other persistence error.
        """
        if self.users.find_by_email(data.email) is not None:
            logger.info("Registration rejected", extra={"reason": "duplicate_email"})
            raise DuplicateEmail()

        try:
            user = self.users.create(
                email=data.email,
                password=data.password,
                name=data.name,
                is_admin=is_admin,
            )
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Registration rejected", extra={"reason": "unique_violation"})
            raise DuplicateEmail() from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Registration failed", extra={"reason": str(e)[:500]})
            raise RegistrationFailed(str(e)) from e

        logger.info("User registered", extra={"user_id": user.id})
        return user

    def check_account_state(self, user: User, event: str = "Access refused") -> None:
        """Raise AccountDisabled or AccountNotFound when the account may no longer be used."""
        if user.status == STATUS_DISABLED:
            logger.info(event, extra={"user_id": user.id, "reason": "disabled"})
            raise AccountDisabled()
        if user.deleted_at is not None:
            logger.info(event, extra={"user_id": user.id, "reason": "deleted"})
            raise AccountNotFound()

    def login(self, data: LoginRequest, require_admin: bool = False) -> LoginResponse:
        """
        Verify credentials, then apply account gates, then issue a token.

        Credentials are always checked first so a wrong password yields
        InvalidCredentials whatever the account state.
        """
        user = self.users.verify_credentials(data.email, data.password)

        if require_admin and not user.is_admin:
            logger.info("Login refused", extra={"user_id": user.id, "reason": "not_admin"})
            raise AdminRequired()
        self.check_account_state(user, "Login refused")

        issued = self.tokens.issue(user.id)
        self.session.commit()
        logger.info(
            "Login succeeded",
            extra={"user_id": user.id, "token_id": issued.identifier, "admin": require_admin},
        )
        return LoginResponse(
            **UserOut.model_validate(user).model_dump(),
            token=issued.value,
            expires_at=issued.expires_at,
        )

    def logout(self, user_id: int, token_identifier: str | None) -> None:
        """Revoke exactly the given token. Revoking an unknown token is a no-op."""
        if not token_identifier:
            raise TokenMissing()
        revoked = self.tokens.revoke(user_id, token_identifier)
        self.session.commit()
        logger.info(
            "Logout",
            extra={"user_id": user_id, "token_id": token_identifier, "revoked": revoked},
        )

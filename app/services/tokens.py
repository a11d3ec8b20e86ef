"""Access token lifecycle: issue, authenticate, revoke, prune expired."""

import hmac
import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import jwt
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.security import decode_access_token, digest_token, encode_access_token
from app.models import AccessToken

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

# Identifier length in bytes; hex-encoded it fills AccessToken.id (32 chars).
TOKEN_IDENTIFIER_BYTES = 16


@dataclass(frozen=True)
class IssuedToken:
    """A newly minted token. value is only ever available at issue time."""

    identifier: str
    value: str
    expires_at: datetime | None


class TokenService:
    """
    Issues and revokes bearer tokens independently of the user record.

    A token is Issued while its row exists and Revoked once the row is gone;
    revocation is one-way. Methods flush but never commit.
    """

    def __init__(self, session: Session, settings: "Settings"):
        self.session = session
        self.settings = settings

    def issue(self, user_id: int) -> IssuedToken:
        now = datetime.now(UTC)
        expires_at = None
        if self.settings.JWT_EXPIRE_MINUTES:
            expires_at = now + timedelta(minutes=self.settings.JWT_EXPIRE_MINUTES)
        identifier = secrets.token_hex(TOKEN_IDENTIFIER_BYTES)
        value = encode_access_token(
            self.settings,
            sub=user_id,
            jti=identifier,
            issued_at=now,
            expires_at=expires_at,
        )
        self.session.add(
            AccessToken(
                id=identifier,
                user_id=user_id,
                token_hash=digest_token(value),
                created_at=now,
                expires_at=expires_at,
            )
        )
        self.session.flush()
        return IssuedToken(identifier=identifier, value=value, expires_at=expires_at)

    def revoke(self, user_id: int, token_id: str) -> bool:
        """Delete the token for this user. Returns False (no-op) if it does not exist."""
        row = self.session.get(AccessToken, token_id)
        if row is None or row.user_id != user_id:
            return False
        self.session.delete(row)
        self.session.flush()
        return True

    def authenticate(self, value: str) -> AccessToken | None:
        """
        Resolve a bearer value to its live AccessToken, or None when the token is
        malformed, badly signed, expired, revoked, or does not match the stored digest.
        """
        try:
            payload = decode_access_token(self.settings, value)
        except jwt.PyJWTError:
            return None
        jti = payload.get("jti")
        if not jti or not isinstance(jti, str):
            return None
        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            return None
        row = self.session.get(AccessToken, jti)
        if row is None or row.user_id != user_id:
            return None
        if not hmac.compare_digest(row.token_hash, digest_token(value)):
            return None
        row.last_used_at = datetime.now(UTC)
        self.session.flush()
        return row

    def list_for_user(self, user_id: int) -> list[AccessToken]:
        stmt = (
            select(AccessToken)
            .where(AccessToken.user_id == user_id)
            .order_by(AccessToken.created_at)
        )
        return list(self.session.scalars(stmt))


def prune_expired_tokens(session: Session, settings: "Settings") -> int:
    """
    Delete access tokens whose expires_at has passed. Tokens without expiry are kept.

    Returns the number of rows deleted. Idempotent: safe to run repeatedly.
    """
    if not settings.TOKEN_PRUNE_ENABLED:
        logger.info("Token pruning is disabled (TOKEN_PRUNE_ENABLED=false); skipping.")
        return 0

    now = datetime.now(UTC)
    deleted_count = (
        session.query(AccessToken)
        .filter(AccessToken.expires_at.is_not(None), AccessToken.expires_at < now)
        .delete(synchronize_session=False)
    )
    session.commit()

    if deleted_count > 0:
        logger.info(
            "Token prune run: now=%s, tokens_deleted=%s",
            now.isoformat(),
            deleted_count,
        )
    return deleted_count

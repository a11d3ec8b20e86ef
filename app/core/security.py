"""Password hashing and JWT encoding/decoding for access tokens."""

import hashlib
from datetime import datetime
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from app.core.config import Settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Input bounds mirrored by the request schemas and the create_user CLI.
NAME_MIN_LEN = 3
NAME_MAX_LEN = 64
EMAIL_MAX_LEN = 254
REGISTER_PASSWORD_MIN_LEN = 8
REGISTER_PASSWORD_MAX_LEN = 512
LOGIN_PASSWORD_MIN_LEN = 8
LOGIN_PASSWORD_MAX_LEN = 32


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash checked when no user matches, so unknown emails cost the same as wrong passwords."""
    return hash_password("authgate-dummy-password")


def digest_token(token: str) -> str:
    """SHA-256 hex digest of a bearer token value; the only form persisted."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def encode_access_token(
    settings: Settings,
    sub: str | int,
    jti: str,
    issued_at: datetime,
    expires_at: datetime | None = None,
) -> str:
    """Create a signed JWT with sub (user id), jti (token identifier), iat and optional exp."""
    payload: dict[str, Any] = {
        "sub": str(sub),
        "jti": jti,
        "iat": issued_at,
    }
    if expires_at is not None:
        payload["exp"] = expires_at
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(settings: Settings, token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, jti, iat and exp when set).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "iat"]},
    )

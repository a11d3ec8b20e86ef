"""Request/response schemas for auth endpoints."""

from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.core.security import (
    EMAIL_MAX_LEN,
    LOGIN_PASSWORD_MAX_LEN,
    LOGIN_PASSWORD_MIN_LEN,
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    REGISTER_PASSWORD_MAX_LEN,
    REGISTER_PASSWORD_MIN_LEN,
)


def _check_email_syntax(value: str) -> str:
    # Syntax only: no DNS lookups, and the address is stored as submitted.
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise PydanticCustomError(
            "email",
            "The {field} field must be a valid email address",
            {"field": "email", "reason": str(e)},
        ) from e
    return value


class RegisterRequest(BaseModel):
    """Payload for account registration."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(
        default=None,
        min_length=NAME_MIN_LEN,
        max_length=NAME_MAX_LEN,
        description="Display name",
    )
    email: str = Field(..., max_length=EMAIL_MAX_LEN, description="Unique email address")
    password: str = Field(
        ...,
        min_length=REGISTER_PASSWORD_MIN_LEN,
        max_length=REGISTER_PASSWORD_MAX_LEN,
        description="Password (hashed before storage)",
    )

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, v: str) -> str:
        return _check_email_syntax(v)


class LoginRequest(BaseModel):
    """Credentials for login."""

    model_config = ConfigDict(extra="ignore")

    email: str = Field(..., max_length=EMAIL_MAX_LEN, description="Email address")
    password: str = Field(
        ...,
        min_length=LOGIN_PASSWORD_MIN_LEN,
        max_length=LOGIN_PASSWORD_MAX_LEN,
        description="Password",
    )

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, v: str) -> str:
        return _check_email_syntax(v)


class UserOut(BaseModel):
    """Serialized user; never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    email: str
    status: str
    is_admin: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class LoginResponse(UserOut):
    """Serialized user plus the freshly issued bearer token."""

    token: str = Field(..., description="Bearer access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_at: datetime | None = Field(default=None, description="Token expiry, if any")


class CurrentUser(BaseModel):
    """Authenticated user (id, email, is_admin) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    is_admin: bool


class UsersListResponse(BaseModel):
    """Response for GET /auth/users (admin only)."""

    users: list[UserOut]


class MessageResponse(BaseModel):
    message: str

"""Register/login/logout routes and auth dependencies (get_auth_context, require_admin)."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.models.user import User
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    UserOut,
    UsersListResponse,
)
from app.services.auth import AuthService

router = APIRouter()
security = HTTPBearer(auto_error=False)


@dataclass
class AuthContext:
    """The authenticated user and the identifier of the token used for this request."""

    user: User
    token_identifier: str | None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return AuthService(db, settings)


def get_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthContext:
    """
    Dependency: require a live Bearer token. Raises 401 if missing, invalid or
    revoked, and 403 once the account has been disabled or soft-deleted.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    token = service.tokens.authenticate(credentials.credentials)
    if token is None:
        raise _unauthorized("Invalid or expired token")
    user = service.users.get_by_id(token.user_id)
    if user is None:
        raise _unauthorized("User not found")
    service.check_account_state(user)
    service.session.commit()
    return AuthContext(user=user, token_identifier=token.id)


def get_current_user(
    context: Annotated[AuthContext, Depends(get_auth_context)],
) -> CurrentUser:
    """Dependency: the authenticated user as a CurrentUser."""
    return CurrentUser.model_validate(context.user)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with is_admin. Raises 403 for non-admin."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserOut:
    """Create an account. 409 if the email is already registered."""
    user = service.register(body)
    return UserOut.model_validate(user)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns the user and a bearer token.
    Include the token in the Authorization header as: Bearer <token>
    """
    return service.login(body)


@router.post("/admin/login", response_model=LoginResponse)
def admin_login(
    body: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """Same as /login, but only administrators are let in."""
    return service.login(body, require_admin=True)


@router.post("/logout", response_model=MessageResponse)
def logout(
    context: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """Revoke the token used to authenticate this request."""
    service.logout(context.user.id, context.token_identifier)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserOut)
def me(context: Annotated[AuthContext, Depends(get_auth_context)]) -> UserOut:
    return UserOut.model_validate(context.user)


@router.get("/users", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UsersListResponse:
    """List all users (admin only)."""
    return UsersListResponse(
        users=[UserOut.model_validate(u) for u in service.users.list_all()]
    )

"""Domain errors raised by the auth services and rendered at the request boundary."""

from typing import Any


class AuthError(Exception):
    """Base error for registration, login and logout failures."""

    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_errors(self) -> list[dict[str, Any]]:
        return [{"message": self.message}]


class InputValidationError(AuthError):
    """Raised when input does not match the expected shape; carries field-level errors."""

    status_code = 422
    default_message = "Validation failed"

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        super().__init__(errors[0]["message"] if errors else None)

    def to_errors(self) -> list[dict[str, Any]]:
        return self.errors


class DuplicateEmail(AuthError):
    status_code = 409
    default_message = "This email address already exists."


class RegistrationFailed(AuthError):
    """Wraps an unexpected persistence error during registration."""

    status_code = 400
    default_message = "An error occurred during registration."


class InvalidCredentials(AuthError):
    status_code = 400
    default_message = "Invalid user credentials"


class AccountDisabled(AuthError):
    status_code = 403
    default_message = "Your account has been disabled. Please contact the administrators."


class AccountNotFound(AuthError):
    status_code = 403
    default_message = "Account does not exist."


class AdminRequired(AuthError):
    status_code = 403
    default_message = "Access denied: you are not allowed to access this section."


class TokenMissing(AuthError):
    status_code = 401
    default_message = "Token not found"

"""Pure input validation returning structured field errors."""

from app.validators.auth import field_errors, validate_login, validate_registration

__all__ = ["field_errors", "validate_login", "validate_registration"]

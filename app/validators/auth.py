"""
Validation for register/login payloads, decoupled from any request object.

Errors are reported as a list of {"message", "rule", "field"} dicts so the API
layer and the create_user CLI render the same thing.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from app.core.errors import InputValidationError
from app.schemas.auth import LoginRequest, RegisterRequest

# pydantic error type -> (rule name, message template)
_RULES: dict[str, tuple[str, str]] = {
    "missing": ("required", "The {field} field must be defined"),
    "string_type": ("string", "The {field} field must be a string"),
    "string_too_short": (
        "minLength",
        "The {field} field must have at least {min_length} characters",
    ),
    "string_too_long": (
        "maxLength",
        "The {field} field must not be greater than {max_length} characters",
    ),
    "email": ("email", "The {field} field must be a valid email address"),
    "model_type": ("object", "The request body must be a JSON object"),
    "model_attributes_type": ("object", "The request body must be a JSON object"),
    "json_invalid": ("json", "The request body must be valid JSON"),
}


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


def field_errors(errors: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Convert pydantic error dicts into {"message", "rule", "field"} entries."""
    out: list[dict[str, Any]] = []
    for err in errors:
        err_type = str(err.get("type", ""))
        # json_invalid locations end in a byte offset, not a field name.
        field = "body" if err_type == "json_invalid" else _field_name(err.get("loc", ()))
        ctx = dict(err.get("ctx") or {})
        if err_type in _RULES:
            rule, template = _RULES[err_type]
            ctx["field"] = field
            try:
                message = template.format(**ctx)
            except (KeyError, IndexError):
                message = str(err.get("msg", template))
        else:
            rule = err_type or "invalid"
            message = str(err.get("msg", "Invalid value"))
        out.append({"message": message, "rule": rule, "field": field})
    return out


def validate_registration(data: Mapping[str, Any]) -> RegisterRequest:
    """Validate a registration payload. Raises InputValidationError with field errors."""
    try:
        return RegisterRequest.model_validate(data)
    except ValidationError as e:
        raise InputValidationError(field_errors(e.errors())) from e


def validate_login(data: Mapping[str, Any]) -> LoginRequest:
    """Validate a login payload. Raises InputValidationError with field errors."""
    try:
        return LoginRequest.model_validate(data)
    except ValidationError as e:
        raise InputValidationError(field_errors(e.errors())) from e

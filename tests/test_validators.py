"""Unit tests for app.validators.auth: structured field errors for register/login payloads."""

import unittest

from app.core.errors import InputValidationError
from app.validators.auth import field_errors, validate_login, validate_registration


def _rules(exc: InputValidationError) -> dict[str, str]:
    return {e["field"]: e["rule"] for e in exc.errors}


class TestValidateRegistration(unittest.TestCase):
    def test_minimal_payload(self) -> None:
        data = validate_registration({"email": "a@x.com", "password": "longenough1"})
        self.assertEqual(data.email, "a@x.com")
        self.assertIsNone(data.name)

    def test_name_bounds(self) -> None:
        with self.assertRaises(InputValidationError) as ctx:
            validate_registration({"name": "ab", "email": "a@x.com", "password": "longenough1"})
        self.assertEqual(_rules(ctx.exception), {"name": "minLength"})

        with self.assertRaises(InputValidationError) as ctx:
            validate_registration({"name": "a" * 65, "email": "a@x.com", "password": "longenough1"})
        self.assertEqual(_rules(ctx.exception), {"name": "maxLength"})

    def test_password_bounds(self) -> None:
        with self.assertRaises(InputValidationError) as ctx:
            validate_registration({"email": "a@x.com", "password": "short"})
        err = ctx.exception.errors[0]
        self.assertEqual(err["rule"], "minLength")
        self.assertEqual(err["field"], "password")
        self.assertIn("8", err["message"])

        validate_registration({"email": "a@x.com", "password": "p" * 512})
        with self.assertRaises(InputValidationError):
            validate_registration({"email": "a@x.com", "password": "p" * 513})

    def test_invalid_email(self) -> None:
        with self.assertRaises(InputValidationError) as ctx:
            validate_registration({"email": "not-an-email", "password": "longenough1"})
        self.assertEqual(_rules(ctx.exception), {"email": "email"})
        self.assertEqual(ctx.exception.status_code, 422)

    def test_email_too_long(self) -> None:
        email = "a" * 250 + "@x.com"
        with self.assertRaises(InputValidationError) as ctx:
            validate_registration({"email": email, "password": "longenough1"})
        self.assertIn("email", _rules(ctx.exception))

    def test_missing_fields_reported_together(self) -> None:
        with self.assertRaises(InputValidationError) as ctx:
            validate_registration({})
        self.assertEqual(_rules(ctx.exception), {"email": "required", "password": "required"})


class TestValidateLogin(unittest.TestCase):
    def test_valid(self) -> None:
        data = validate_login({"email": "a@x.com", "password": "longenough1"})
        self.assertEqual(data.password, "longenough1")

    def test_password_upper_bound_is_stricter_than_registration(self) -> None:
        validate_registration({"email": "a@x.com", "password": "p" * 33})
        with self.assertRaises(InputValidationError) as ctx:
            validate_login({"email": "a@x.com", "password": "p" * 33})
        self.assertEqual(_rules(ctx.exception), {"password": "maxLength"})

    def test_non_string_password(self) -> None:
        with self.assertRaises(InputValidationError) as ctx:
            validate_login({"email": "a@x.com", "password": 12345678})
        self.assertEqual(_rules(ctx.exception), {"password": "string"})


class TestFieldErrors(unittest.TestCase):
    """field_errors strips the 'body' location prefix FastAPI adds."""

    def test_body_prefix_removed(self) -> None:
        out = field_errors(
            [{"type": "missing", "loc": ("body", "email"), "msg": "Field required"}]
        )
        self.assertEqual(
            out,
            [{"message": "The email field must be defined", "rule": "required", "field": "email"}],
        )

    def test_whole_body_missing(self) -> None:
        out = field_errors([{"type": "missing", "loc": ("body",), "msg": "Field required"}])
        self.assertEqual(out[0]["field"], "body")

    def test_invalid_json_points_at_body(self) -> None:
        out = field_errors(
            [{"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error", "ctx": {"error": "Expecting value"}}]
        )
        self.assertEqual(
            out,
            [{"message": "The request body must be valid JSON", "rule": "json", "field": "body"}],
        )

    def test_unknown_type_keeps_pydantic_message(self) -> None:
        out = field_errors([{"type": "bool_parsing", "loc": ("flag",), "msg": "bad bool"}])
        self.assertEqual(out, [{"message": "bad bool", "rule": "bool_parsing", "field": "flag"}])


if __name__ == "__main__":
    unittest.main()

"""Unit tests for app.core.security: bcrypt hashing and token encoding."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt
from support import make_settings

from app.core.security import (
    decode_access_token,
    digest_token,
    encode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("longenough1")
        self.assertNotEqual(hashed, "longenough1")
        self.assertTrue(verify_password("longenough1", hashed))
        self.assertFalse(verify_password("longenough2", hashed))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("longenough1"), hash_password("longenough1"))

    def test_only_first_72_bytes_count(self) -> None:
        base = "x" * 72
        hashed = hash_password(base + "tail-one")
        self.assertTrue(verify_password(base + "tail-two", hashed))

    def test_malformed_hash_does_not_raise(self) -> None:
        self.assertFalse(verify_password("longenough1", "not-a-bcrypt-hash"))


class TestAccessTokenEncoding(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = make_settings()

    def test_round_trip_claims(self) -> None:
        now = datetime.now(UTC)
        token = encode_access_token(self.settings, sub=7, jti="abc", issued_at=now)
        payload = decode_access_token(self.settings, token)
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["jti"], "abc")

    def test_expired_raises(self) -> None:
        now = datetime.now(UTC)
        token = encode_access_token(
            self.settings,
            sub=7,
            jti="abc",
            issued_at=now - timedelta(hours=2),
            expires_at=now - timedelta(hours=1),
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(self.settings, token)

    def test_digest_is_stable_sha256_hex(self) -> None:
        self.assertEqual(digest_token("abc"), digest_token("abc"))
        self.assertEqual(len(digest_token("abc")), 64)
        self.assertNotEqual(digest_token("abc"), digest_token("abd"))


if __name__ == "__main__":
    unittest.main()

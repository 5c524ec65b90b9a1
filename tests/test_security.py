"""Unit tests for sysapi.core.security: bcrypt hashing and signed session tokens."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import jwt
from pydantic import SecretStr

from sysapi.core.config import Settings
from sysapi.core.security import (
    create_session_token,
    decode_session_token,
    hash_password,
    verify_password,
)


def _settings(**kwargs: object) -> Settings:
    defaults: dict = {"DATABASE_URL": "sqlite://", "SESSION_SECRET": SecretStr("test-secret")}
    defaults.update(kwargs)
    return Settings(_env_file=None, **defaults)


@patch("sysapi.core.security.BCRYPT_ROUNDS", 4)
class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("123")
        self.assertNotEqual(hashed, "123")
        self.assertTrue(hashed.startswith("$2"))

    def test_hashes_are_salted(self) -> None:
        self.assertNotEqual(hash_password("123"), hash_password("123"))

    def test_verify_matches(self) -> None:
        self.assertTrue(verify_password("123", hash_password("123")))

    def test_verify_wrong_password(self) -> None:
        self.assertFalse(verify_password("124", hash_password("123")))

    def test_verify_garbage_hash(self) -> None:
        self.assertFalse(verify_password("123", "not-a-bcrypt-hash"))

    def test_verify_missing_hash(self) -> None:
        self.assertFalse(verify_password("123", None))


class TestSessionToken(unittest.TestCase):
    def test_round_trip(self) -> None:
        settings = _settings()
        token = create_session_token("alice", frozenset({"1"}), settings)
        payload = decode_session_token(token, settings)
        self.assertEqual(payload["sub"], "alice")
        self.assertEqual(payload["roles"], ["1"])

    def test_empty_role_set(self) -> None:
        settings = _settings()
        payload = decode_session_token(create_session_token("bob", frozenset(), settings), settings)
        self.assertEqual(payload["roles"], [])

    def test_other_secret_rejected(self) -> None:
        token = create_session_token("alice", frozenset(), _settings())
        with self.assertRaises(jwt.PyJWTError):
            decode_session_token(token, _settings(SESSION_SECRET=SecretStr("other")))

    def test_expired_rejected(self) -> None:
        settings = _settings()
        past = datetime.now(UTC) - timedelta(hours=2)
        token = jwt.encode(
            {"sub": "alice", "roles": [], "iat": past, "exp": past + timedelta(minutes=1)},
            "test-secret",
            algorithm="HS256",
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_session_token(token, settings)


if __name__ == "__main__":
    unittest.main()

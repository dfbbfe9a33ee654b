"""Unit tests for app.core.security: bcrypt hashing, password policy and JWT issue/verify."""

import unittest
from datetime import timedelta
from types import SimpleNamespace

import jwt

from app.core.config import settings
from app.core.security import (
    InvalidTokenError,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    is_valid_account_number,
    password_policy_errors,
    token_user_id,
    verify_password,
)


def _user(**kwargs: object) -> SimpleNamespace:
    defaults = {
        "id": 7,
        "email": "a@x.com",
        "username": "alice01",
        "account_number": "ACC1234",
        "role": "customer",
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("Abc12345!")
        self.assertNotIn("Abc12345!", hashed)
        self.assertTrue(hashed.startswith("$2"))
        self.assertTrue(verify_password("Abc12345!", hashed))

    def test_wrong_password_fails(self) -> None:
        hashed = hash_password("Abc12345!")
        self.assertFalse(verify_password("Abc12345?", hashed))

    def test_same_password_gets_different_salts(self) -> None:
        self.assertNotEqual(hash_password("Abc12345!"), hash_password("Abc12345!"))

    def test_malformed_stored_hash_is_a_mismatch_not_a_crash(self) -> None:
        self.assertFalse(verify_password("Abc12345!", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("Abc12345!", ""))

    def test_cost_factor_comes_from_settings(self) -> None:
        hashed = hash_password("Abc12345!")
        self.assertEqual(int(hashed.split("$")[2]), settings.BCRYPT_SALT_ROUNDS)


class TestPasswordPolicy(unittest.TestCase):
    def test_strong_password_passes(self) -> None:
        self.assertEqual(password_policy_errors("Abc12345!"), [])

    def test_each_missing_class_is_reported(self) -> None:
        self.assertIn("password must contain an uppercase letter", password_policy_errors("abc12345!"))
        self.assertIn("password must contain a lowercase letter", password_policy_errors("ABC12345!"))
        self.assertIn("password must contain a digit", password_policy_errors("Abcdefgh!"))
        self.assertIn("password must contain a symbol", password_policy_errors("Abc123456"))

    def test_too_short(self) -> None:
        self.assertEqual(len(password_policy_errors("Ab1!")), 1)

    def test_account_number_format(self) -> None:
        self.assertTrue(is_valid_account_number("ACC1234"))
        self.assertFalse(is_valid_account_number("AC1"))
        self.assertFalse(is_valid_account_number("ACC-1234"))
        self.assertFalse(is_valid_account_number("A" * 21))


class TestAccessToken(unittest.TestCase):
    def test_round_trip_keeps_identity_and_role(self) -> None:
        token = create_access_token(_user(role="employee"))
        payload = decode_token(token, expected_type="access")
        self.assertEqual(token_user_id(payload), 7)
        self.assertEqual(payload["role"], "employee")
        self.assertEqual(payload["email"], "a@x.com")
        self.assertEqual(payload["username"], "alice01")
        self.assertEqual(payload["account_number"], "ACC1234")

    def test_default_lifetime_is_configured_minutes(self) -> None:
        payload = decode_token(create_access_token(_user()))
        self.assertEqual(
            payload["exp"] - payload["iat"], settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
        )

    def test_expired_token_fails(self) -> None:
        token = create_access_token(_user(), expires_delta=timedelta(seconds=-1))
        with self.assertRaises(InvalidTokenError):
            decode_token(token)

    def test_wrong_secret_fails(self) -> None:
        forged = jwt.encode(
            {"sub": "7", "role": "employee", "type": "access", "exp": 9999999999},
            "some-other-secret-that-is-also-32-chars-long",
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            decode_token(forged)

    def test_garbage_fails(self) -> None:
        with self.assertRaises(InvalidTokenError):
            decode_token("not.a.jwt")


class TestRefreshToken(unittest.TestCase):
    def test_carries_only_user_id_claims(self) -> None:
        payload = decode_token(create_refresh_token(_user()), expected_type="refresh")
        self.assertEqual(payload["sub"], "7")
        self.assertNotIn("role", payload)
        self.assertNotIn("email", payload)

    def test_default_lifetime_is_configured_days(self) -> None:
        payload = decode_token(create_refresh_token(_user()), expected_type="refresh")
        self.assertEqual(
            payload["exp"] - payload["iat"], settings.REFRESH_TOKEN_EXPIRE_DAYS * 86400
        )

    def test_two_refresh_tokens_differ(self) -> None:
        self.assertNotEqual(create_refresh_token(_user()), create_refresh_token(_user()))

    def test_token_types_are_not_interchangeable(self) -> None:
        with self.assertRaises(InvalidTokenError):
            decode_token(create_refresh_token(_user()), expected_type="access")
        with self.assertRaises(InvalidTokenError):
            decode_token(create_access_token(_user()), expected_type="refresh")


if __name__ == "__main__":
    unittest.main()

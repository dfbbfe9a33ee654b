"""Unit tests for app.core.config: startup validation of security-relevant settings."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from app.core.config import Settings

GOOD_SECRET = "x" * 32


class TestJwtSecret(unittest.TestCase):
    def test_missing_secret_is_fatal(self) -> None:
        env = {k: v for k, v in os.environ.items() if k.upper() != "JWT_SECRET"}
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_short_secret_is_fatal(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET="x" * 31)

    def test_whitespace_padding_does_not_count(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET="   " + "x" * 20 + "   ")

    def test_32_chars_accepted(self) -> None:
        s = Settings(_env_file=None, JWT_SECRET=GOOD_SECRET)
        self.assertEqual(s.JWT_SECRET.get_secret_value(), GOOD_SECRET)


class TestOtherSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, BCRYPT_SALT_ROUNDS=10)
        self.assertEqual(s.ACCESS_TOKEN_EXPIRE_MINUTES, 15)
        self.assertEqual(s.REFRESH_TOKEN_EXPIRE_DAYS, 30)
        self.assertEqual(s.BCRYPT_SALT_ROUNDS, 10)
        self.assertEqual(s.JWT_ALGORITHM, "HS256")

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, BCRYPT_SALT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, BCRYPT_SALT_ROUNDS=32)

    def test_database_url_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, DATABASE_URL="mysql://x/y")
        s = Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, DATABASE_URL="sqlite:///./p.db")
        self.assertEqual(s.DATABASE_URL, "sqlite:///./p.db")

    def test_log_level_is_normalized(self) -> None:
        s = Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, LOG_LEVEL="debug")
        self.assertEqual(s.LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, LOG_LEVEL="chatty")

    def test_api_prefix_must_be_absolute(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, API_PREFIX="api")
        s = Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, API_PREFIX="/api/")
        self.assertEqual(s.API_PREFIX, "/api")


if __name__ == "__main__":
    unittest.main()

"""Test package. Settings are read at import time, so the test environment is fixed here first."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-that-is-long-enough-for-hs256-signing"
os.environ["BCRYPT_SALT_ROUNDS"] = "4"
os.environ["APP_ENV"] = "dev"
os.environ["API_PREFIX"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

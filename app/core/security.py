"""Password hashing and JWT creation/verification for authentication."""

import re
import uuid
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any, Literal

import bcrypt
import jwt

from app.core.config import settings

if TYPE_CHECKING:
    from app.models.user import User

TokenType = Literal["access", "refresh"]

# Re-exported so callers only catch one error type for any bad token.
InvalidTokenError = jwt.InvalidTokenError

# Input limits shared by schemas and the seeding CLI.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128
PASSWORD_SYMBOLS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?~`"

_ACCOUNT_NUMBER_PATTERN = re.compile(r"^[A-Za-z0-9]{4,20}$")

# bcrypt only looks at the first 72 bytes.
_BCRYPT_MAX_BYTES = 72


def password_policy_errors(password: str) -> list[str]:
    """Return the list of policy rules the password breaks (empty when it is acceptable)."""
    problems: list[str] = []
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        problems.append(
            f"password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters"
        )
    if not any(c.isupper() for c in password):
        problems.append("password must contain an uppercase letter")
    if not any(c.islower() for c in password):
        problems.append("password must contain a lowercase letter")
    if not any(c.isdigit() for c in password):
        problems.append("password must contain a digit")
    if not any(c in PASSWORD_SYMBOLS for c in password):
        problems.append("password must contain a symbol")
    return problems


def is_valid_account_number(value: str) -> bool:
    return bool(_ACCOUNT_NUMBER_PATTERN.match(value))


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_SALT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash; malformed hashes never match."""
    if not hashed:
        return False
    pw_bytes = plain_password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _encode(payload: dict[str, Any]) -> str:
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)


def create_access_token(user: "User", expires_delta: timedelta | None = None) -> str:
    """Create a short-lived access token carrying the user's identity and role."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user.id),
        "email": user.email,
        "username": user.username,
        "account_number": user.account_number,
        "role": user.role,
        "type": "access",
        "iat": now,
        "exp": now + expires_delta,
    }
    return _encode(payload)


def create_refresh_token(user: "User", expires_delta: timedelta | None = None) -> str:
    """Create a long-lived refresh token; it carries only the user id."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    payload: dict[str, Any] = {
        "sub": str(user.id),
        "type": "refresh",
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": now + expires_delta,
    }
    return _encode(payload)


def decode_token(token: str, expected_type: TokenType = "access") -> dict[str, Any]:
    """
    Decode and validate a JWT; return its payload.
    Raises InvalidTokenError on bad signature, expiry, missing subject or wrong token type.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    payload = jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "sub"]},
    )
    if payload.get("type") != expected_type:
        raise InvalidTokenError(f"Expected a {expected_type} token")
    return payload


def token_user_id(payload: dict[str, Any]) -> int:
    """Extract the integer user id from a decoded token."""
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token subject") from e

"""Request/response schemas for registration, login and token endpoints."""

from typing import Literal

from pydantic import ConfigDict, EmailStr, Field, field_validator

from app.core.security import (
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    is_valid_account_number,
    password_policy_errors,
)
from app.schemas.common import CamelModel

UserRole = Literal["customer", "employee"]


def _validate_username(value: str) -> str:
    value = value.strip()
    if not (USERNAME_MIN_LEN <= len(value) <= USERNAME_MAX_LEN):
        raise ValueError(
            f"username must be {USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} characters"
        )
    if "@" in value:
        raise ValueError("username must not contain '@'")
    return value


def _validate_password(value: str) -> str:
    problems = password_policy_errors(value)
    if problems:
        raise ValueError("; ".join(problems))
    return value


def _validate_account_number(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if not is_valid_account_number(value):
        raise ValueError("accountNumber must be 4-20 alphanumeric characters")
    return value


class RegisterRequest(CamelModel):
    """Public self-registration. Any role field sent by the client is ignored."""

    model_config = ConfigDict(extra="ignore")

    username: str = Field(..., description="Display/login name (3-50 chars)")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(
        ...,
        description="8-128 chars with upper, lower, digit and symbol",
    )
    account_number: str | None = Field(
        default=None, description="Optional bank account number (4-20 alphanumeric)"
    )

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        return _validate_username(v)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return _validate_password(v)

    @field_validator("account_number")
    @classmethod
    def check_account_number(cls, v: str | None) -> str | None:
        return _validate_account_number(v)


class AdminRegisterRequest(RegisterRequest):
    """Employee-only registration; may create either role."""

    role: UserRole = Field(default="customer", description="customer or employee")


class RegisterResponse(CamelModel):
    ok: bool = True
    user_id: int


class LoginRequest(CamelModel):
    """Credentials for login: email or username, password, optional account number."""

    email: str | None = None
    username: str | None = None
    password: str | None = None
    account_number: str | None = None

    @property
    def identifier(self) -> str | None:
        for candidate in (self.email, self.username):
            if candidate and candidate.strip():
                return candidate.strip()
        return None


class LoginResponse(CamelModel):
    """Tokens plus the identity the client needs to render its session."""

    ok: bool = True
    token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")
    user_id: int
    username: str
    email: str
    role: UserRole


class RefreshRequest(CamelModel):
    refresh_token: str | None = None


class TokenRefreshResponse(CamelModel):
    token: str = Field(..., description="New JWT access token")


class LogoutRequest(CamelModel):
    refresh_token: str | None = None


class CurrentUser(CamelModel):
    """Authenticated identity decoded from the access token, for dependency injection."""

    id: int
    username: str
    email: str
    account_number: str | None = None
    role: UserRole

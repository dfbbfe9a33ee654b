"""Schemas for the authenticated user's profile."""

from datetime import datetime

from pydantic import EmailStr, field_validator

from app.schemas.auth import UserRole, _validate_password
from app.schemas.common import CamelModel


class UserOut(CamelModel):
    """Public view of a user (no password hash)."""

    id: int
    username: str
    email: str
    account_number: str | None = None
    role: UserRole
    created_at: datetime | None = None


class ProfileResponse(CamelModel):
    ok: bool = True
    user: UserOut


class ProfileUpdateRequest(CamelModel):
    """Fields the user may change on their own profile."""

    email: EmailStr | None = None
    password: str | None = None

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str | None) -> str | None:
        return v.strip().lower() if v else None

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return _validate_password(v)

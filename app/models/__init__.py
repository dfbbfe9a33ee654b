"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.payment import Payment
from app.models.refresh_token import RefreshToken
from app.models.user import User

__all__ = ["Base", "Payment", "RefreshToken", "User"]

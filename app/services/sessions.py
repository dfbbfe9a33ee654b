"""Refresh token lifecycle: issue on login, exchange for access tokens, revoke on logout."""

import logging
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import AuthenticationError, ValidationError
from app.core.security import (
    InvalidTokenError,
    create_access_token,
    create_refresh_token,
    decode_token,
    token_user_id,
)
from app.models import RefreshToken, User

logger = logging.getLogger(__name__)


def issue_session(db: Session, user: User) -> tuple[str, str]:
    """
    Mint an access/refresh token pair and persist the refresh token.

    Returns (access_token, refresh_token).
    """
    access_token = create_access_token(user)
    refresh_token = create_refresh_token(user)
    expires_at = datetime.now(UTC) + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    db.add(RefreshToken(token=refresh_token, user_id=user.id, expires_at=expires_at))
    db.commit()
    return access_token, refresh_token


def refresh_access_token(db: Session, refresh_token: str | None) -> str:
    """
    Exchange a stored, valid refresh token for a new access token.

    The token must be both present in the store (not revoked) and cryptographically
    valid. The new access token carries the user's current role.
    """
    if not refresh_token:
        raise ValidationError("Missing refreshToken")

    stored = db.query(RefreshToken).filter(RefreshToken.token == refresh_token).first()
    if stored is None:
        raise AuthenticationError("Invalid refresh token")

    try:
        payload = decode_token(refresh_token, expected_type="refresh")
        user_id = token_user_id(payload)
    except InvalidTokenError as e:
        logger.info("Refresh rejected: %s", type(e).__name__)
        raise AuthenticationError("Invalid or expired refresh token") from e

    user = db.get(User, user_id)
    if user is None or stored.user_id != user.id:
        raise AuthenticationError("User not found")
    return create_access_token(user)


def revoke_refresh_token(db: Session, refresh_token: str | None) -> None:
    """Delete the refresh token if given; unknown tokens are ignored."""
    if not refresh_token:
        return
    deleted = (
        db.query(RefreshToken)
        .filter(RefreshToken.token == refresh_token)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info("Refresh token revoked")

"""Registration, credential checks and profile updates."""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from app.core.security import hash_password, verify_password
from app.models import User
from app.models.user import ROLE_CUSTOMER, USER_ROLES
from app.schemas.auth import RegisterRequest
from app.schemas.users import ProfileUpdateRequest

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"

# Compared against when no user matches, so a miss costs the same bcrypt work as a hit.
_dummy_hash: str | None = None


def _get_dummy_hash() -> str:
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("Dummy-password-1!")
    return _dummy_hash


def register_user(db: Session, payload: RegisterRequest, role: str = ROLE_CUSTOMER) -> User:
    """
    Create a user from an already-validated payload.

    Public registration always passes the default role; only the employee-gated
    admin route passes another one. Duplicate email or username raises ConflictError.
    """
    if role not in USER_ROLES:
        raise ValidationError(f"Unknown role: {role}")

    existing = (
        db.query(User)
        .filter(
            or_(
                User.email == payload.email,
                User.username == payload.username,
                # an identifier must never resolve to two different accounts at login
                User.email == payload.username.lower(),
                User.username == payload.email,
            )
        )
        .first()
    )
    if existing is not None:
        raise ConflictError("User already exists")

    user = User(
        username=payload.username,
        email=payload.email,
        password_hash=hash_password(payload.password),
        account_number=payload.account_number,
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Concurrent registration with the same email/username won the race.
        db.rollback()
        raise ConflictError("User already exists") from e
    db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id, "role": user.role})
    return user


def _find_by_identifier(db: Session, identifier: str) -> User | None:
    """Exact email match wins; only then is the identifier tried as a username."""
    user = db.query(User).filter(User.email == identifier.lower()).first()
    if user is None:
        user = db.query(User).filter(User.username == identifier).first()
    return user


def authenticate(
    db: Session,
    identifier: str | None,
    password: str | None,
    account_number: str | None = None,
) -> User:
    """
    Resolve login credentials to a user.

    identifier is looked up as an email (case-insensitive) first, then as a username.
    Every failure raises the same AuthenticationError and costs one bcrypt check,
    so callers cannot tell which factor failed.
    """
    if not identifier or not password:
        raise ValidationError("Missing credentials")

    user = _find_by_identifier(db, identifier)
    if user is None:
        verify_password(password, _get_dummy_hash())
        logger.warning("Login failed: unknown identifier")
        raise AuthenticationError(INVALID_CREDENTIALS)

    supplied_account = account_number.strip() if account_number else None
    account_mismatch = bool(
        supplied_account and user.account_number and user.account_number != supplied_account
    )
    stored_hash = _get_dummy_hash() if account_mismatch else user.password_hash
    password_ok = verify_password(password, stored_hash)

    if account_mismatch:
        logger.warning("Login failed: account number mismatch", extra={"user_id": user.id})
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not password_ok:
        logger.warning("Login failed: bad password", extra={"user_id": user.id})
        raise AuthenticationError(INVALID_CREDENTIALS)

    return user


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def update_profile(db: Session, user_id: int, changes: ProfileUpdateRequest) -> User:
    """Apply email/password changes to the user's own record."""
    user = get_user(db, user_id)

    if changes.email and changes.email != user.email:
        taken = (
            db.query(User)
            .filter(
                or_(User.email == changes.email, User.username == changes.email),
                User.id != user.id,
            )
            .first()
        )
        if taken is not None:
            raise ConflictError("Email already in use")
        user.email = changes.email
    if changes.password:
        user.password_hash = hash_password(changes.password)

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Email already in use") from e
    db.refresh(user)
    return user

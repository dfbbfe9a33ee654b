"""Request pipeline dependencies: bearer credential -> verified identity -> role check."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Header

from app.core.errors import AuthenticationError, AuthorizationError
from app.core.security import InvalidTokenError, decode_token, token_user_id
from app.models.user import ROLE_EMPLOYEE
from app.schemas.auth import CurrentUser


def get_bearer_token(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Extract the token from 'Authorization: Bearer <token>'."""
    if not authorization:
        raise AuthenticationError("Missing Authorization header")
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Invalid Authorization format")
    return token.strip()


def get_current_user(token: Annotated[str, Depends(get_bearer_token)]) -> CurrentUser:
    """Dependency: verify the access token and return the identity it carries. Raises 401."""
    try:
        payload = decode_token(token, expected_type="access")
        return CurrentUser(
            id=token_user_id(payload),
            username=payload.get("username") or "",
            email=payload.get("email") or "",
            account_number=payload.get("account_number"),
            role=payload.get("role"),
        )
    except (InvalidTokenError, ValueError) as e:
        # ValueError covers a signed payload whose role/fields fail schema validation.
        raise AuthenticationError("Invalid or expired token") from e


def require_role(*roles: str) -> Callable[[CurrentUser], CurrentUser]:
    """Build a dependency that admits only authenticated users holding one of roles. Raises 403."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role not in roles:
            raise AuthorizationError("Access denied")
        return current_user

    return dependency


require_employee = require_role(ROLE_EMPLOYEE)

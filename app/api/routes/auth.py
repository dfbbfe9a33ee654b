"""Registration, login, token refresh and logout."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.api.deps import require_employee
from app.core.database import get_db
from app.schemas.auth import (
    AdminRegisterRequest,
    CurrentUser,
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    RefreshRequest,
    RegisterRequest,
    RegisterResponse,
    TokenRefreshResponse,
)
from app.schemas.common import ErrorResponse, OkResponse
from app.services.sessions import issue_session, refresh_access_token, revoke_refresh_token
from app.services.users import authenticate, register_user

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={400: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """
    Self-service registration. New accounts are always customers;
    a role field in the body is ignored.
    """
    user = register_user(db, body)
    return RegisterResponse(user_id=user.id)


@router.post(
    "/admin/register",
    response_model=RegisterResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
def admin_register(
    body: AdminRegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    _employee: Annotated[CurrentUser, Depends(require_employee)],
) -> RegisterResponse:
    """Create a customer or employee account (employee only)."""
    user = register_user(db, body, role=body.role)
    return RegisterResponse(user_id=user.id)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with email or username and password (plus optional account number).
    Returns an access token for the Authorization header (Bearer <token>) and a
    refresh token for POST /token/refresh.
    """
    user = authenticate(db, body.identifier, body.password, body.account_number)
    access_token, refresh_token = issue_session(db, user)
    return LoginResponse(
        token=access_token,
        refresh_token=refresh_token,
        user_id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
    )


@router.post(
    "/token/refresh",
    response_model=TokenRefreshResponse,
    responses={401: {"model": ErrorResponse}},
)
def refresh_token(
    body: RefreshRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenRefreshResponse:
    """Exchange a stored refresh token for a new access token."""
    return TokenRefreshResponse(token=refresh_access_token(db, body.refresh_token))


@router.post("/logout", response_model=OkResponse)
def logout(
    db: Annotated[Session, Depends(get_db)],
    body: Annotated[LogoutRequest | None, Body()] = None,
) -> OkResponse:
    """Revoke the given refresh token. Always succeeds."""
    revoke_refresh_token(db, body.refresh_token if body else None)
    return OkResponse()

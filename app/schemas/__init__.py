"""Pydantic request/response schemas."""

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
    UserRole,
)
from app.schemas.common import CamelModel, ErrorResponse, OkResponse
from app.schemas.health import HealthResponse
from app.schemas.payments import (
    AdminPaymentOut,
    AdminPaymentsResponse,
    Currency,
    PaymentCreateRequest,
    PaymentOut,
    PaymentResponse,
    PaymentsResponse,
    PaymentStatus,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)
from app.schemas.users import ProfileResponse, ProfileUpdateRequest, UserOut

__all__ = [
    "AdminPaymentOut",
    "AdminPaymentsResponse",
    "AdminRegisterRequest",
    "CamelModel",
    "Currency",
    "CurrentUser",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "LogoutRequest",
    "OkResponse",
    "PaymentCreateRequest",
    "PaymentOut",
    "PaymentResponse",
    "PaymentStatus",
    "PaymentsResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "RefreshRequest",
    "RegisterRequest",
    "RegisterResponse",
    "TokenRefreshResponse",
    "UserOut",
    "UserRole",
    "VerifyPaymentRequest",
    "VerifyPaymentResponse",
]

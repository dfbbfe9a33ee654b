"""Request/response schemas for payments and payment review."""

import re
from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import Field, field_serializer, field_validator

from app.schemas.common import CamelModel

Currency = Literal["ZAR", "USD", "EUR", "GBP"]
PaymentStatus = Literal["pending", "verified", "rejected", "submitted"]

SWIFT_CODE_PATTERN = re.compile(r"^[A-Z]{6}[A-Z0-9]{2}([A-Z0-9]{3})?$")
DESCRIPTION_MAX_LEN = 500
# Largest value a Numeric(12, 2) column holds.
MAX_AMOUNT = Decimal("9999999999.99")


class PaymentCreateRequest(CamelModel):
    """New payment from the authenticated customer."""

    amount: Decimal = Field(..., gt=0, le=MAX_AMOUNT, decimal_places=2)
    currency: Currency = Field(default="ZAR", description="ZAR, USD, EUR or GBP")
    swift_code: str | None = Field(
        default=None, description="SWIFT/BIC of the beneficiary bank (8 or 11 chars)"
    )
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LEN)

    @field_validator("currency", mode="before")
    @classmethod
    def upper_currency(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("swift_code")
    @classmethod
    def check_swift_code(cls, v: str | None) -> str | None:
        if v is None:
            return None
        code = v.strip().upper()
        if not code:
            return None
        if not SWIFT_CODE_PATTERN.match(code):
            raise ValueError("swiftCode must be a valid SWIFT/BIC code (e.g. ABCDEFGH)")
        return code

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class PaymentOut(CamelModel):
    id: int
    user_id: int
    amount: Decimal
    currency: Currency
    swift_code: str | None = None
    description: str | None = None
    status: PaymentStatus
    verified_by: int | None = None
    verified_at: datetime | None = None
    date: datetime

    @field_serializer("amount")
    def serialize_amount(self, v: Decimal) -> float:
        return float(v)


class PaymentOwner(CamelModel):
    """Owner summary embedded in the employee view."""

    id: int
    username: str
    email: str
    account_number: str | None = None


class AdminPaymentOut(PaymentOut):
    owner: PaymentOwner | None = None


class PaymentResponse(CamelModel):
    ok: bool = True
    payment: PaymentOut


class PaymentsResponse(CamelModel):
    ok: bool = True
    payments: list[PaymentOut]


class AdminPaymentsResponse(CamelModel):
    ok: bool = True
    payments: list[AdminPaymentOut]


class VerifyPaymentRequest(CamelModel):
    """Review decision; anything other than verified/rejected is refused."""

    status: str = Field(..., description="verified or rejected")


class VerifyPaymentResponse(CamelModel):
    ok: bool = True
    payment: PaymentOut
    message: str

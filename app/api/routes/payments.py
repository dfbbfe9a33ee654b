"""Customer payments and employee review."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_employee
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.common import ErrorResponse
from app.schemas.payments import (
    AdminPaymentOut,
    AdminPaymentsResponse,
    PaymentCreateRequest,
    PaymentOut,
    PaymentResponse,
    PaymentsResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)
from app.services.payments import (
    create_payment,
    list_all_payments,
    list_payments_for_user,
    review_message,
    verify_payment,
)
from app.services.swift import SwiftGateway, get_swift_gateway

router = APIRouter()


@router.get("/payments", response_model=PaymentsResponse)
def get_payments(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> PaymentsResponse:
    """The caller's own payments, newest first."""
    payments = list_payments_for_user(db, current_user.id)
    return PaymentsResponse(payments=[PaymentOut.model_validate(p) for p in payments])


@router.post("/payments", response_model=PaymentResponse)
def post_payment(
    body: PaymentCreateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> PaymentResponse:
    """Submit a payment for review. It starts in status 'pending'."""
    payment = create_payment(db, current_user.id, body)
    return PaymentResponse(payment=PaymentOut.model_validate(payment))


@router.get(
    "/admin/all-payments",
    response_model=AdminPaymentsResponse,
    responses={403: {"model": ErrorResponse}},
)
def get_all_payments(
    _employee: Annotated[CurrentUser, Depends(require_employee)],
    db: Annotated[Session, Depends(get_db)],
) -> AdminPaymentsResponse:
    """Every payment with its owner (employee only)."""
    payments = list_all_payments(db)
    return AdminPaymentsResponse(
        payments=[AdminPaymentOut.model_validate(p) for p in payments]
    )


@router.patch(
    "/payments/{payment_id}/verify",
    response_model=VerifyPaymentResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
def patch_verify_payment(
    payment_id: str,
    body: VerifyPaymentRequest,
    employee: Annotated[CurrentUser, Depends(require_employee)],
    db: Annotated[Session, Depends(get_db)],
    gateway: Annotated[SwiftGateway, Depends(get_swift_gateway)],
) -> VerifyPaymentResponse:
    """
    Review a pending payment (employee only).

    status=verified submits the payment to SWIFT (status becomes 'submitted');
    status=rejected rejects it. Payments that are not pending return 404.
    """
    payment = verify_payment(db, payment_id, body.status, employee.id, gateway)
    return VerifyPaymentResponse(
        payment=PaymentOut.model_validate(payment),
        message=review_message(payment),
    )

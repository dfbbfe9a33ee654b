"""Payment ledger: creation, listing and the employee review state machine.

pending -> submitted (verified and handed to SWIFT)
pending -> rejected
submitted and rejected are terminal; there is no re-review.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import update
from sqlalchemy.orm import Session, selectinload

from app.core.errors import NotFoundError, ValidationError
from app.models import Payment
from app.models.payment import (
    STATUS_PENDING,
    STATUS_REJECTED,
    STATUS_SUBMITTED,
    STATUS_VERIFIED,
)
from app.schemas.payments import PaymentCreateRequest
from app.services.swift import SwiftGateway

logger = logging.getLogger(__name__)

# Review decision -> status the payment ends up in.
REVIEW_TRANSITIONS: dict[str, str] = {
    STATUS_VERIFIED: STATUS_SUBMITTED,
    STATUS_REJECTED: STATUS_REJECTED,
}

NOT_ELIGIBLE = "Payment not found or already processed"


def create_payment(db: Session, owner_id: int, payload: PaymentCreateRequest) -> Payment:
    payment = Payment(
        user_id=owner_id,
        amount=payload.amount,
        currency=payload.currency,
        swift_code=payload.swift_code,
        description=payload.description,
        status=STATUS_PENDING,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    logger.info(
        "Payment created",
        extra={"payment_id": payment.id, "user_id": owner_id, "currency": payment.currency},
    )
    return payment


def list_payments_for_user(db: Session, user_id: int) -> list[Payment]:
    """The user's own payments, newest first."""
    return (
        db.query(Payment)
        .filter(Payment.user_id == user_id)
        .order_by(Payment.date.desc(), Payment.id.desc())
        .all()
    )


def list_all_payments(db: Session) -> list[Payment]:
    """Every payment with its owner loaded, newest first (employee view)."""
    return (
        db.query(Payment)
        .options(selectinload(Payment.owner))
        .order_by(Payment.date.desc(), Payment.id.desc())
        .all()
    )


def parse_payment_id(raw: str | int) -> int:
    """Validate a payment reference before it is used in a lookup."""
    if isinstance(raw, int):
        value = raw
    else:
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            raise ValidationError("Invalid payment id")
        value = int(text)
    if value < 1 or value > 2**31 - 1:
        raise ValidationError("Invalid payment id")
    return value


def verify_payment(
    db: Session,
    payment_id: str | int,
    decision: str,
    reviewer_id: int,
    gateway: SwiftGateway,
) -> Payment:
    """
    Apply an employee's review decision to a pending payment.

    The status change is a single conditional UPDATE guarded by status = 'pending',
    so two concurrent reviews cannot both transition the same payment. A payment
    that is missing or no longer pending raises NotFoundError and is left as is.
    On 'verified' the committed payment is then passed to the SWIFT gateway.
    """
    if decision not in REVIEW_TRANSITIONS:
        raise ValidationError(
            "Invalid status",
            errors=[{"field": "status", "message": "status must be verified or rejected"}],
        )
    pid = parse_payment_id(payment_id)
    new_status = REVIEW_TRANSITIONS[decision]

    result = db.execute(
        update(Payment)
        .where(Payment.id == pid, Payment.status == STATUS_PENDING)
        .values(status=new_status, verified_by=reviewer_id, verified_at=datetime.now(UTC))
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        db.rollback()
        raise NotFoundError(NOT_ELIGIBLE)
    db.commit()

    payment = db.get(Payment, pid, populate_existing=True)
    logger.info(
        "Payment reviewed",
        extra={"payment_id": pid, "decision": decision, "reviewer_id": reviewer_id},
    )
    if new_status == STATUS_SUBMITTED:
        gateway.submit(payment)
    return payment


def review_message(payment: Payment) -> str:
    if payment.status == STATUS_SUBMITTED:
        return "Payment verified and submitted to SWIFT"
    return "Payment rejected"

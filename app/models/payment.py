"""ORM model for customer payments and their review state."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from app.models.base import Base, utcnow

STATUS_PENDING = "pending"
STATUS_VERIFIED = "verified"
STATUS_REJECTED = "rejected"
STATUS_SUBMITTED = "submitted"
DEFAULT_CURRENCY = "ZAR"


class Payment(Base):
    """
    A payment submitted by a customer.

    Starts 'pending'; an employee review moves it to 'submitted' (verified and
    handed to SWIFT) or 'rejected'. verified_by/verified_at are only set by
    that review.
    """

    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_payments_amount_positive"),
        CheckConstraint(
            "status IN ('pending', 'verified', 'rejected', 'submitted')",
            name="ck_payments_status",
        ),
        CheckConstraint(
            "currency IN ('ZAR', 'USD', 'EUR', 'GBP')", name="ck_payments_currency"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    currency = Column(String(3), nullable=False, default=DEFAULT_CURRENCY)
    swift_code = Column(String(11), nullable=True)
    description = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=STATUS_PENDING, index=True)
    verified_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    verified_at = Column(DateTime(timezone=True), nullable=True)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    owner = relationship("User", foreign_keys=[user_id])
    verifier = relationship("User", foreign_keys=[verified_by])

"""SWIFT submission hook. Only a simulated gateway exists; real settlement is out of scope."""

import logging
from typing import Protocol

from app.models import Payment

logger = logging.getLogger(__name__)


class SwiftGateway(Protocol):
    """Hands a verified payment to the interbank network."""

    def submit(self, payment: Payment) -> None: ...


class SimulatedSwiftGateway:
    """Logs the submission instead of sending it anywhere."""

    def submit(self, payment: Payment) -> None:
        logger.info(
            "Simulated SWIFT submission",
            extra={
                "payment_id": payment.id,
                "amount": str(payment.amount),
                "currency": payment.currency,
                "swift_code": payment.swift_code or "",
            },
        )


def get_swift_gateway() -> SwiftGateway:
    """Dependency returning the gateway used for verified payments (override in tests)."""
    return SimulatedSwiftGateway()

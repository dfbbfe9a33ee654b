"""ORM model for portal users (customers and employees)."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String

from app.models.base import Base, utcnow

ROLE_CUSTOMER = "customer"
ROLE_EMPLOYEE = "employee"
USER_ROLES: frozenset[str] = frozenset({ROLE_CUSTOMER, ROLE_EMPLOYEE})


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'customer' (self-registered) or 'employee' (seeded, reviews payments).
    email is stored lower-cased; password_hash is a bcrypt hash, never the plaintext.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('customer', 'employee')", name="ck_users_role"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    account_number = Column(String(20), nullable=True)
    role = Column(String(32), nullable=False, default=ROLE_CUSTOMER)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

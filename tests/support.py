"""Shared fixtures: a fresh in-memory schema per test and helpers for users and tokens."""

import unittest

from fastapi.testclient import TestClient

from app.core.database import SessionLocal, engine
from app.main import app
from app.models import Base, User
from app.schemas.auth import AdminRegisterRequest
from app.services.users import register_user

DEFAULT_PASSWORD = "Abc12345!"
EMPLOYEE_PASSWORD = "Review3r!Pass"


def create_user(
    username: str,
    email: str,
    password: str = DEFAULT_PASSWORD,
    role: str = "customer",
    account_number: str | None = None,
) -> int:
    """Insert a user through the service layer and return its id."""
    payload = AdminRegisterRequest(
        username=username,
        email=email,
        password=password,
        account_number=account_number,
        role=role,
    )
    with SessionLocal() as db:
        return register_user(db, payload, role=role).id


def fetch_user(user_id: int) -> User | None:
    with SessionLocal() as db:
        return db.get(User, user_id)


class DatabaseTestCase(unittest.TestCase):
    """Creates all tables before each test and drops them afterwards."""

    def setUp(self) -> None:
        Base.metadata.create_all(engine)

    def tearDown(self) -> None:
        Base.metadata.drop_all(engine)


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient and login helpers."""

    def setUp(self) -> None:
        super().setUp()
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def login(self, identifier: str, password: str = DEFAULT_PASSWORD) -> dict:
        field = "email" if "@" in identifier else "username"
        resp = self.client.post("/login", json={field: identifier, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def auth_headers(self, identifier: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        token = self.login(identifier, password)["token"]
        return {"Authorization": f"Bearer {token}"}

    def employee_headers(self) -> dict[str, str]:
        create_user("reviewer", "reviewer@bank.co.za", EMPLOYEE_PASSWORD, role="employee")
        return self.auth_headers("reviewer@bank.co.za", EMPLOYEE_PASSWORD)

"""Tests for app.core.errors: every failure becomes a safe JSON body."""

import unittest

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from app.core.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ServerError,
    register_exception_handlers,
)


class _Body(BaseModel):
    amount: int


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/conflict")
    def conflict() -> None:
        raise ConflictError("User already exists")

    @app.get("/missing")
    def missing() -> None:
        raise NotFoundError("Payment not found or already processed")

    @app.get("/unauth")
    def unauth() -> None:
        raise AuthenticationError()

    @app.get("/server")
    def server() -> None:
        raise ServerError("db password is hunter2")

    @app.get("/boom")
    def boom() -> None:
        raise RuntimeError("secret stack detail")

    @app.post("/body")
    def body(payload: _Body) -> dict:
        return {"amount": payload.amount}

    return app


class TestErrorResponses(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(_app(), raise_server_exceptions=False)

    def test_conflict_is_400_with_message(self) -> None:
        resp = self.client.get("/conflict")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "User already exists"})

    def test_not_found(self) -> None:
        self.assertEqual(self.client.get("/missing").status_code, 404)

    def test_authentication_error_defaults(self) -> None:
        resp = self.client.get("/unauth")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid credentials"})
        self.assertEqual(resp.headers.get("www-authenticate"), "Bearer")

    def test_server_error_message_is_never_exposed(self) -> None:
        resp = self.client.get("/server")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Server error"})

    def test_unhandled_exception_is_generic_500(self) -> None:
        resp = self.client.get("/boom")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Server error"})
        self.assertNotIn("secret", resp.text)

    def test_request_validation_is_400_with_field_list(self) -> None:
        resp = self.client.post("/body", json={"amount": "lots"})
        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertFalse(body["ok"])
        self.assertEqual(body["errors"][0]["field"], "amount")

    def test_unknown_route_uses_message_shape(self) -> None:
        resp = self.client.get("/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Not Found"})


if __name__ == "__main__":
    unittest.main()

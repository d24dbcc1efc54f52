"""Unit tests for HTTP error translation."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from reef.adapter.error import GitlabResponseError
from reef.domain.error import (
    AuthenticationFailedError,
    DuplicateUserError,
    ErrorCode,
    IncorrectCredentialsError,
    InternalFailureError,
    UserNotFoundError,
    ValidationFailedError,
)
from reef.interface.api.errors import register_error_handlers


class Body(BaseModel):
    value: int


ERRORS = {
    "validation": ValidationFailedError("Invalid username"),
    "duplicate": DuplicateUserError("email", "a@example.org"),
    "not-found": UserNotFoundError("alice"),
    "credentials": IncorrectCredentialsError(),
    "provider-401": AuthenticationFailedError(status_code=401, message="Incorrect user or password"),
    "provider-409": AuthenticationFailedError(status_code=409, message="Email taken", detail="raw"),
    "provider-504": AuthenticationFailedError(status_code=504, message="timeout"),
    "internal": InternalFailureError("db exploded: password=hunter2"),
    "adapter": GitlabResponseError("Malformed token response"),
    "unexpected": ConnectionError("connection to postgres lost"),
}


@pytest.fixture
def client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/{name}")
    async def raise_error(name: str):
        raise ERRORS[name]

    @app.post("/body")
    async def body(payload: Body):
        return payload

    # Unhandled errors are re-raised by Starlette after the response is sent
    return TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:
    """Tests for the exception handlers."""

    @pytest.mark.parametrize(
        "name,status_code,code",
        [
            ("validation", 400, ErrorCode.VALIDATION_FAILED),
            ("duplicate", 409, ErrorCode.USER_ALREADY_EXISTS),
            ("not-found", 404, ErrorCode.USER_NOT_FOUND),
            ("credentials", 401, ErrorCode.INCORRECT_CREDENTIALS),
            ("provider-401", 401, ErrorCode.AUTHENTICATION_FAILED),
            ("provider-409", 403, ErrorCode.AUTHENTICATION_FAILED),
            ("provider-504", 403, ErrorCode.AUTHENTICATION_FAILED),
            ("internal", 500, ErrorCode.INTERNAL_FAILURE),
            ("adapter", 500, ErrorCode.INTERNAL_FAILURE),
            ("unexpected", 500, ErrorCode.INTERNAL_FAILURE),
        ],
    )
    def test_status_and_body(self, client, name, status_code, code):
        """Each error maps to its status and carries code, name and message."""
        response = client.get(f"/raise/{name}")

        assert response.status_code == status_code
        body = response.json()
        assert set(body) == {"error_code", "error_name", "error_message"}
        assert body["error_code"] == code.number
        assert body["error_name"] == code.error_name

    def test_duplicate_message(self, client):
        """Client-facing errors keep their message."""
        body = client.get("/raise/duplicate").json()

        assert body["error_message"] == "User with email 'a@example.org' already exists"

    def test_internal_message_hidden(self, client):
        """Internal failures do not leak details."""
        body = client.get("/raise/internal").json()

        assert body["error_message"] == "Internal failure"

    def test_unexpected_error_hidden(self, client):
        """Unknown faults get the JSON error body without their details."""
        response = client.get("/raise/unexpected")

        assert response.headers["content-type"] == "application/json"
        assert response.json()["error_message"] == "Internal failure"

    def test_provider_detail_hidden(self, client):
        """Provider payloads stay out of the response."""
        body = client.get("/raise/provider-409").json()

        assert "raw" not in body["error_message"]

    def test_request_validation(self, client):
        """Schema errors on the request body are reported as ValidationFailed."""
        response = client.post("/body", json={"value": "not a number"})

        assert response.status_code == 400
        body = response.json()
        assert body["error_name"] == "ValidationFailed"
        assert body["error_message"].startswith("value:")

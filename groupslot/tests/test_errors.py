"""Tests for standardized error handling."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from groupslot.errors import (
    BadRequestError,
    ConflictError,
    ErrorResponse,
    NotFoundError,
    ServiceUnavailableError,
    StoreError,
    register_exception_handlers,
)


class TestAPIErrors:
    def test_not_found_defaults(self):
        error = NotFoundError()
        assert error.status_code == 404
        assert error.error == "not_found"
        assert error.detail == "Resource not found"

    def test_context_is_collected(self):
        error = NotFoundError(detail="Event not found", event_id="evt1")
        assert error.context == {"event_id": "evt1"}

    def test_status_codes(self):
        assert BadRequestError().status_code == 400
        assert ConflictError().status_code == 409
        assert ServiceUnavailableError().status_code == 503
        assert StoreError().status_code == 500

    def test_minimal_response(self):
        assert ErrorResponse(error="internal_error").model_dump(exclude_none=True) == {"error": "internal_error"}


def test_handler_renders_error_response():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise ConflictError(detail="Participant already submitted; reopen to edit", participant_id="p1")

    client = TestClient(app, raise_server_exceptions=False)
    res = client.get("/boom")
    assert res.status_code == 409
    assert res.json() == {
        "error": "conflict",
        "detail": "Participant already submitted; reopen to edit",
        "context": {"participant_id": "p1"},
    }

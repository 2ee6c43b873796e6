"""Errors raised by the HTTP layer and the store, rendered as JSON.

The scheduling core never raises for bad input (it degrades to empty
results). Controllers raise these when a lookup misses, a slot is off the
event grid or a participant is in the wrong state; the store raises
``StoreError`` when Redis fails. Keyword arguments become ``context``:

    raise ConflictError(
        detail="Participant already submitted; reopen to edit",
        participant_id=participant.id,
    )

renders as 409 with
``{"error": "conflict", "detail": "...", "context": {"participant_id": "..."}}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """JSON body of every error response."""

    error: str
    detail: str | None = None
    error_code: str | None = None
    context: dict[str, Any] | None = None


class APIError(Exception):
    """Base error; subclasses pin the status and error name."""

    status_code: int = 500
    error: str = "internal_error"
    detail: str = "An unexpected error occurred"

    def __init__(
        self,
        detail: str | None = None,
        error_code: str | None = None,
        **context: Any,
    ) -> None:
        self.detail = detail or self.__class__.detail
        self.error_code = error_code
        self.context = context if context else None
        super().__init__(self.detail)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error=self.error,
            detail=self.detail,
            error_code=self.error_code,
            context=self.context,
        )


class NotFoundError(APIError):
    """Unknown event, participant, meeting or weekly schedule (404)."""

    status_code = 404
    error = "not_found"
    detail = "Resource not found"


class BadRequestError(APIError):
    """Slot key that is not on the event grid (400)."""

    status_code = 400
    error = "bad_request"
    detail = "Invalid request"


class ConflictError(APIError):
    """Availability edit on a participant that has already submitted (409)."""

    status_code = 409
    error = "conflict"
    detail = "Request conflicts with current state"


class ServiceUnavailableError(APIError):
    """Redis client not connected (503)."""

    status_code = 503
    error = "service_unavailable"
    detail = "Service temporarily unavailable"


class StoreError(APIError):
    """Redis read, write or delete failed (500)."""

    status_code = 500
    error = "store_error"
    detail = "Store operation failed"


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    logger.warning(
        "API error: %s (status=%d, path=%s)",
        exc.detail,
        exc.status_code,
        request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every APIError through api_error_handler."""
    app.add_exception_handler(APIError, api_error_handler)

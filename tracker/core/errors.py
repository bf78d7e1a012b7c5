"""
Custom exception hierarchy for the Intern Tracker.

Rule: every HTTP error has a machine-readable `code` string so clients
can branch on it without parsing English messages.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class TrackerException(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class MalformedDateError(TrackerException):
    """A day value could not be read as a calendar date."""
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "MALFORMED_DATE"

    def __init__(self, value: Any):
        super().__init__(
            message=f"Cannot parse {value!r} as a calendar date (expected YYYY-MM-DD).",
            details={"value": str(value)},
        )


class InternNotFoundError(TrackerException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "INTERN_NOT_FOUND"

    def __init__(self, intern_id: str):
        super().__init__(
            message=f"Intern {intern_id} does not exist.",
            details={"intern_id": intern_id},
        )


class InternAlreadyExistsError(TrackerException):
    http_status = status.HTTP_409_CONFLICT
    code = "INTERN_ALREADY_EXISTS"

    def __init__(self, intern_id: str):
        super().__init__(
            message=f"Intern {intern_id} is already registered.",
            details={"intern_id": intern_id},
        )


class DuplicateSubmissionError(TrackerException):
    http_status = status.HTTP_409_CONFLICT
    code = "DUPLICATE_SUBMISSION"

    def __init__(self, intern_id: str, day: date):
        super().__init__(
            message=f"A record for {day} already exists for intern {intern_id}.",
            details={"intern_id": intern_id, "day": str(day)},
        )


class EmptyImportError(TrackerException):
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "EMPTY_IMPORT"

    def __init__(self):
        super().__init__(message="Import must contain at least one intern or activity row.")


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def tracker_exception_handler(request: Request, exc: TrackerException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return structured 422 with machine-readable field errors."""
    field_errors = []
    for error in exc.errors():
        field_errors.append({
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        })
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed.",
            "details": {"errors": field_errors},
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred.",
        },
    )

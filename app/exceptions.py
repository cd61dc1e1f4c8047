# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Every error response has the same shape: {"error": "<message>"}.
# Expected errors (bad input, unknown id) are returned as-is; store failures
# are logged with full detail and reported to the caller as an opaque 500.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from lib.database import StoreError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class TodoAppException(Exception):
    """
    Base exception for expected API errors.

    All custom HTTP exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "TODO_APP_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# Todo Exceptions
# =============================================================================

class TodoValidationError(TodoAppException):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str = "Text is required", field: str = "text"):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            details={"field": field},
        )


class TodoNotFoundError(TodoAppException):
    """Raised when a todo ID doesn't exist."""

    def __init__(self, todo_id: int):
        super().__init__(
            message="Todo not found",
            code="TODO_NOT_FOUND",
            status_code=404,
            details={"todo_id": todo_id},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def todo_app_exception_handler(
    request: Request,
    exc: TodoAppException
) -> JSONResponse:
    """
    Convert TodoAppException to JSON response.

    These are expected outcomes, so they're only logged at debug level.
    """
    logger.debug(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def store_exception_handler(
    request: Request,
    exc: StoreError
) -> JSONResponse:
    """
    Handle persistence failures.

    The driver message stays in the server log; the caller gets a generic
    message.
    """
    logger.error(f"Store error on {request.method} {request.url.path}: {exc.to_dict()}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": INTERNAL_ERROR_MESSAGE}
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors (bad JSON, wrong types, non-integer id).

    Reported as 400 with the same {"error": ...} body as other client errors.
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request",
            "details": jsonable_encoder(exc.errors()),
        }
    )

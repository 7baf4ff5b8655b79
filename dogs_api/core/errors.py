"""
Exception hierarchy for the Dogs API.

Every application error has a machine-readable `code` string so clients
can branch on it without parsing English messages.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class DogsApiException(Exception):
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


class InvalidDogIdError(DogsApiException):
    http_status = status.HTTP_400_BAD_REQUEST
    code = "INVALID_ID"

    def __init__(self, raw_id: str):
        super().__init__(
            message="id should be a number",
            details={"id": raw_id},
        )


class DogValidationError(DogsApiException):
    http_status = status.HTTP_400_BAD_REQUEST
    code = "INVALID_BODY"

    def __init__(self, errors: Sequence[str]):
        self.errors = list(errors)
        super().__init__(message="Request body failed validation.")

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class DogStoreError(DogsApiException):
    """The store rejected or failed an operation."""
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "STORE_ERROR"

    def __init__(self, operation: str, dog_id: int | None = None):
        self.operation = operation
        self.dog_id = dog_id
        details: dict[str, Any] = {"operation": operation}
        if dog_id is not None:
            details["id"] = dog_id
        super().__init__(message="Internal Server Error", details=details)

    def to_dict(self) -> dict:
        # Store internals stay out of the response body.
        return {"code": self.code, "message": self.message, "error": self.message}


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def dogs_api_exception_handler(request: Request, exc: DogsApiException) -> JSONResponse:
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
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred.",
        },
    )

"""
Shared schema primitives used across the API.
"""
from typing import Any, Optional
from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned for 4xx/5xx responses."""
    code: str
    message: str
    details: Optional[dict[str, Any]] = None


class BodyErrorResponse(BaseModel):
    """400 returned when a request body fails the dog schema."""
    code: str
    message: str
    errors: list[str]


class StoreErrorResponse(BaseModel):
    code: str
    message: str
    error: str

"""
Dogs router.

GET    /dogs        — list all dogs
GET    /dogs/{id}   — single dog
POST   /dogs        — create (full validation)
PATCH  /dogs/{id}   — partial update (unknown-key validation only)
DELETE /dogs/{id}   — delete

Lookups that find nothing, and store failures on read/update/delete, both
answer 204 with an empty body. Only create reports a store failure as 500.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from dogs_api.core.errors import DogStoreError, DogValidationError, InvalidDogIdError
from dogs_api.db.base import get_db
from dogs_api.models.dog import Dog
from dogs_api.schemas.common import BodyErrorResponse, ErrorResponse, StoreErrorResponse
from dogs_api.schemas.dog import DogCreatedResponse, DogOut
from dogs_api.services.dogs import create_dog, delete_dog, get_dog, list_dogs, update_dog
from dogs_api.services.validation import Invalid, validate_full, validate_partial

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dogs", tags=["dogs"])

_NOT_FOUND = {"description": "No dog with that id (or the store failed)."}
_BAD_ID = {"model": ErrorResponse, "description": "id is not a number."}

# Plain ASCII decimal or exponent notation, or a signed Infinity.
_NUMBER_RE = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|Infinity)")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def parse_dog_id(raw: str) -> float:
    """Parse a path id as a number; anything that is not one is a 400."""
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidDogIdError(raw_id=raw)
    return float(text)


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _to_out(dog: Dog) -> DogOut:
    return DogOut.model_validate(dog)


# ---------------------------------------------------------------------------
# GET /dogs
# ---------------------------------------------------------------------------

@router.get(
    "",
    response_model=list[DogOut],
    summary="List all dogs",
    responses={200: {"description": "All dogs; an empty list when there are none."}},
)
def list_all(db: Session = Depends(get_db)):
    return [_to_out(d) for d in list_dogs(db)]


# ---------------------------------------------------------------------------
# GET /dogs/{dog_id}
# ---------------------------------------------------------------------------

@router.get(
    "/{dog_id}",
    response_model=DogOut,
    summary="Retrieve a single dog by id",
    responses={204: _NOT_FOUND, 400: _BAD_ID},
)
def get_one(dog_id: str, db: Session = Depends(get_db)):
    key = parse_dog_id(dog_id)
    try:
        dog = get_dog(db, key)
    except DogStoreError:
        dog = None
    if dog is None:
        logger.info("Dog not found", extra={"operation": "get", "path": f"/dogs/{dog_id}"})
        return _no_content()
    return _to_out(dog)


# ---------------------------------------------------------------------------
# POST /dogs
# ---------------------------------------------------------------------------

@router.post(
    "",
    response_model=DogCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a dog",
    responses={
        400: {"model": BodyErrorResponse, "description": "Body failed validation."},
        500: {"model": StoreErrorResponse, "description": "The store rejected the dog."},
    },
)
def create(payload: Optional[dict[str, Any]] = Body(default=None), db: Session = Depends(get_db)):
    """
    Create a dog from `{name, description, breed, age}`.

    Every field is required. Wrong types, missing fields and unknown keys are
    all reported together in `errors`.
    """
    body = payload or {}
    outcome = validate_full(body)
    if isinstance(outcome, Invalid):
        logger.info(
            "Rejected dog body",
            extra={"operation": "create", "error_count": len(outcome.errors)},
        )
        raise DogValidationError(outcome.errors)

    dog = create_dog(db, body)
    return DogCreatedResponse(message="Dog created successfully", dog=_to_out(dog))


# ---------------------------------------------------------------------------
# PATCH /dogs/{dog_id}
# ---------------------------------------------------------------------------

@router.patch(
    "/{dog_id}",
    response_model=DogOut,
    status_code=status.HTTP_201_CREATED,
    summary="Partially update a dog",
    responses={
        204: _NOT_FOUND,
        400: {"model": BodyErrorResponse, "description": "Non-numeric id or unknown key."},
    },
)
def update(
    dog_id: str,
    payload: Optional[dict[str, Any]] = Body(default=None),
    db: Session = Depends(get_db),
):
    """
    Apply the given fields to an existing dog. Omitted fields are left
    unchanged; only unknown keys are rejected up front.
    """
    key = parse_dog_id(dog_id)
    body = payload or {}
    outcome = validate_partial(body)
    if isinstance(outcome, Invalid):
        logger.info(
            "Rejected dog body",
            extra={"operation": "update", "error_count": len(outcome.errors)},
        )
        raise DogValidationError(outcome.errors)

    try:
        dog = update_dog(db, key, body)
    except DogStoreError:
        dog = None
    if dog is None:
        return _no_content()
    return _to_out(dog)


# ---------------------------------------------------------------------------
# DELETE /dogs/{dog_id}
# ---------------------------------------------------------------------------

@router.delete(
    "/{dog_id}",
    response_model=DogOut,
    summary="Delete a dog",
    responses={204: _NOT_FOUND, 400: _BAD_ID},
)
def delete(dog_id: str, db: Session = Depends(get_db)):
    key = parse_dog_id(dog_id)
    try:
        dog = delete_dog(db, key)
    except DogStoreError:
        dog = None
    if dog is None:
        return _no_content()
    return _to_out(dog)

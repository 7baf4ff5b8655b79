"""
Dog store: data access over a SQLAlchemy session.

Public API
----------
list_dogs(db)                    → list[Dog]
get_dog(db, dog_id)              → Dog | None
create_dog(db, fields)           → Dog
update_dog(db, dog_id, changes)  → Dog | None
delete_dog(db, dog_id)           → Dog | None

`None` means no row matches. Backend failures (including values the ORM
rejects) roll back and raise `DogStoreError`.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dogs_api.core.errors import DogStoreError
from dogs_api.models.dog import Dog
from dogs_api.services.validation import DOG_SCHEMA

logger = logging.getLogger(__name__)

# ORM validators raise ValueError for values of the wrong column type.
_STORE_FAILURES = (SQLAlchemyError, ValueError)


_MAX_ROW_ID = 2**63 - 1


def _row_key(dog_id: float) -> Optional[int]:
    """Primary key for a parsed id, or None when no row could ever match."""
    if isinstance(dog_id, float) and not dog_id.is_integer():
        return None
    key = int(dog_id)
    if not 0 < key <= _MAX_ROW_ID:
        return None
    return key


def _fail(db: Session, operation: str, dog_id: Optional[int], exc: Exception) -> DogStoreError:
    db.rollback()
    logger.warning(
        "Store operation failed: %s",
        exc,
        extra={"operation": operation, "dog_id": dog_id},
    )
    return DogStoreError(operation=operation, dog_id=dog_id)


def list_dogs(db: Session) -> list[Dog]:
    try:
        return list(db.scalars(select(Dog).order_by(Dog.id)).all())
    except SQLAlchemyError as exc:
        raise _fail(db, "list", None, exc) from exc


def get_dog(db: Session, dog_id: float) -> Optional[Dog]:
    key = _row_key(dog_id)
    if key is None:
        return None
    try:
        return db.get(Dog, key)
    except SQLAlchemyError as exc:
        raise _fail(db, "get", key, exc) from exc


def create_dog(db: Session, fields: Mapping[str, Any]) -> Dog:
    data = {key: fields.get(key) for key in DOG_SCHEMA}
    try:
        dog = Dog(**data)
        db.add(dog)
        db.commit()
        db.refresh(dog)
    except _STORE_FAILURES as exc:
        raise _fail(db, "create", None, exc) from exc
    logger.info("Dog created", extra={"operation": "create", "dog_id": dog.id})
    return dog


def update_dog(db: Session, dog_id: float, changes: Mapping[str, Any]) -> Optional[Dog]:
    dog = get_dog(db, dog_id)
    if dog is None:
        return None
    try:
        for key, value in changes.items():
            setattr(dog, key, value)
        db.commit()
        db.refresh(dog)
    except _STORE_FAILURES as exc:
        raise _fail(db, "update", dog.id, exc) from exc
    logger.info("Dog updated", extra={"operation": "update", "dog_id": dog.id})
    return dog


def delete_dog(db: Session, dog_id: float) -> Optional[Dog]:
    dog = get_dog(db, dog_id)
    if dog is None:
        return None
    try:
        db.delete(dog)
        db.commit()
    except SQLAlchemyError as exc:
        raise _fail(db, "delete", dog.id, exc) from exc
    logger.info("Dog deleted", extra={"operation": "delete", "dog_id": dog.id})
    return dog

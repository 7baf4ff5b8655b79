"""
Request-body validation against a field schema.

Public API
----------
type_errors(record, schema)          → list[str]   wrong type for known keys
missing_key_errors(record, schema)   → list[str]   schema keys absent from record
unknown_key_errors(record, schema)   → list[str]   record keys the schema lacks
validate_full(record, schema)        → ValidationResult   (create)
validate_partial(record, schema)     → ValidationResult   (update)

Nothing here raises or keeps state; callers branch on `Valid` / `Invalid`.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping, Union


class FieldType(str, enum.Enum):
    string = "string"
    number = "number"


# Ordered: missing-key messages follow this order.
DOG_SCHEMA: dict[str, FieldType] = {
    "name": FieldType.string,
    "description": FieldType.string,
    "breed": FieldType.string,
    "age": FieldType.number,
}


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Valid:
    pass


@dataclass(frozen=True)
class Invalid:
    errors: tuple[str, ...]


ValidationResult = Union[Valid, Invalid]


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def _conforms(value: Any, field_type: FieldType) -> bool:
    if field_type is FieldType.string:
        return isinstance(value, str)
    if field_type is FieldType.number:
        # bool is an int subclass but not a number on the wire.
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return False


def _type_message(key: str, field_type: FieldType) -> str:
    return f"{key} should be a {field_type.value}"


def type_errors(
    record: Mapping[str, Any], schema: Mapping[str, FieldType] = DOG_SCHEMA
) -> list[str]:
    return [
        _type_message(key, schema[key])
        for key, value in record.items()
        if key in schema and not _conforms(value, schema[key])
    ]


def missing_key_errors(
    record: Mapping[str, Any], schema: Mapping[str, FieldType] = DOG_SCHEMA
) -> list[str]:
    """Absent keys only; a present `None` is a type error, not a missing key."""
    return [
        _type_message(key, field_type)
        for key, field_type in schema.items()
        if key not in record
    ]


def unknown_key_errors(
    record: Mapping[str, Any], schema: Mapping[str, FieldType] = DOG_SCHEMA
) -> list[str]:
    return [f"'{key}' is not a valid key" for key in record if key not in schema]


# ---------------------------------------------------------------------------
# Composed validations
# ---------------------------------------------------------------------------

def _result(errors: list[str]) -> ValidationResult:
    return Invalid(errors=tuple(errors)) if errors else Valid()


def validate_full(
    record: Mapping[str, Any], schema: Mapping[str, FieldType] = DOG_SCHEMA
) -> ValidationResult:
    """Validate a complete record: types, then missing keys, then unknown keys."""
    return _result(
        type_errors(record, schema)
        + missing_key_errors(record, schema)
        + unknown_key_errors(record, schema)
    )


def validate_partial(
    record: Mapping[str, Any], schema: Mapping[str, FieldType] = DOG_SCHEMA
) -> ValidationResult:
    """
    Validate a partial update. Only unknown keys are reported: omitted fields
    mean "unchanged", and value types are left for the store to reject.
    """
    return _result(unknown_key_errors(record, schema))

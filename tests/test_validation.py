"""
Unit tests for the request-body validator.
"""
import pytest

from dogs_api.services.validation import (
    DOG_SCHEMA,
    FieldType,
    Invalid,
    Valid,
    missing_key_errors,
    type_errors,
    unknown_key_errors,
    validate_full,
    validate_partial,
)

GOOD = {"name": "Rex", "description": "fast", "breed": "lab", "age": 3}


class TestTypeErrors:
    def test_correct_types_pass(self):
        assert type_errors(GOOD) == []

    def test_age_as_string(self):
        assert type_errors({**GOOD, "age": "3"}) == ["age should be a number"]

    def test_float_age_is_a_number(self):
        assert type_errors({**GOOD, "age": 3.5}) == []

    def test_bool_is_not_a_number(self):
        assert type_errors({**GOOD, "age": True}) == ["age should be a number"]

    def test_none_is_a_type_error(self):
        assert type_errors({**GOOD, "name": None}) == ["name should be a string"]

    def test_unknown_keys_are_skipped(self):
        assert type_errors({"nickname": 12}) == []

    def test_absent_keys_are_skipped(self):
        assert type_errors({}) == []

    def test_order_follows_record(self):
        errors = type_errors({"age": "old", "name": 1})
        assert errors == ["age should be a number", "name should be a string"]


class TestMissingKeyErrors:
    def test_full_record_has_none_missing(self):
        assert missing_key_errors(GOOD) == []

    def test_empty_record_reports_every_key_in_schema_order(self):
        assert missing_key_errors({}) == [
            "name should be a string",
            "description should be a string",
            "breed should be a string",
            "age should be a number",
        ]

    def test_falsy_values_are_not_missing(self):
        record = {"name": "", "description": "", "breed": "", "age": 0}
        assert missing_key_errors(record) == []

    def test_present_none_is_not_missing(self):
        assert missing_key_errors({**GOOD, "breed": None}) == []


class TestUnknownKeyErrors:
    def test_known_keys_pass(self):
        assert unknown_key_errors(GOOD) == []

    def test_unknown_key_message(self):
        assert unknown_key_errors({"nickname": "Rex"}) == ["'nickname' is not a valid key"]

    def test_id_is_not_a_valid_key(self):
        assert unknown_key_errors({"id": 1}) == ["'id' is not a valid key"]


class TestValidateFull:
    def test_valid_record(self):
        assert validate_full(GOOD) == Valid()

    def test_wrong_type_reported(self):
        result = validate_full({**GOOD, "age": "3"})
        assert isinstance(result, Invalid)
        assert "age should be a number" in result.errors

    @pytest.mark.parametrize("missing", list(DOG_SCHEMA))
    def test_one_message_per_missing_key(self, missing):
        record = {k: v for k, v in GOOD.items() if k != missing}
        result = validate_full(record)
        expected = f"{missing} should be a {DOG_SCHEMA[missing].value}"
        assert result == Invalid(errors=(expected,))

    def test_checks_concatenate_in_order(self):
        record = {"nickname": "Rex", "age": "3", "name": "Rex", "breed": "lab"}
        result = validate_full(record)
        assert result.errors == (
            "age should be a number",          # type
            "description should be a string",  # missing
            "'nickname' is not a valid key",   # unknown
        )

    def test_repeated_calls_are_identical(self):
        record = {"age": "3", "extra": 1}
        assert validate_full(record) == validate_full(record)
        assert record == {"age": "3", "extra": 1}


class TestValidatePartial:
    def test_empty_update_is_valid(self):
        assert validate_partial({}) == Valid()

    def test_subset_is_valid(self):
        assert validate_partial({"name": "Max"}) == Valid()

    def test_unknown_key_rejected(self):
        result = validate_partial({"nickname": "Rex"})
        assert result == Invalid(errors=("'nickname' is not a valid key",))

    def test_wrong_type_not_reported(self):
        assert validate_partial({"age": "3"}) == Valid()


class TestCustomSchema:
    def test_checks_accept_any_schema(self):
        schema = {"title": FieldType.string}
        assert validate_full({}, schema) == Invalid(errors=("title should be a string",))
        assert validate_full({"title": "x"}, schema) == Valid()

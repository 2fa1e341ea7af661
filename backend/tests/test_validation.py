"""
Roster Backend — Request Validation Unit Tests
================================================

What:  Tests for parse_user_id, validate_create_user and validate_update_user.
Why:   Validation is the only thing standing between client input and the
       store, which trusts the values it receives.
"""

import pytest

from roster.exceptions import ValidationError
from roster.models.user import Role
from roster.validation import parse_user_id, validate_create_user, validate_update_user

ROLE_MESSAGE = "role must be one of the following values: TEACHER, STUDENT, ADMIN"


class TestParseUserId:
    """Tests for path parameter parsing."""

    @pytest.mark.parametrize("raw, expected", [("7", 7), ("-1", -1), ("007", 7), ("123456", 123456)])
    def test_accepts_integers(self, raw, expected):
        assert parse_user_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "1.5", "", "+3", " 1", "1e3", "٣"])
    def test_rejects_non_integers(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            parse_user_id(raw)

        assert exc_info.value.message == "Validation failed (numeric string is expected)"
        assert exc_info.value.status_code == 400

    def test_rejects_id_too_long_to_convert(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_user_id("9" * 5000)

        assert exc_info.value.message == "Validation failed (numeric string is expected)"


class TestValidateCreateUser:
    """Tests for the POST /users body."""

    def test_valid_body(self):
        request = validate_create_user({"name": "Alice", "age": 22, "role": "STUDENT"})

        assert request.name == "Alice"
        assert request.age == 22
        assert request.role is Role.STUDENT

    def test_minimum_age_is_accepted(self):
        assert validate_create_user({"name": "Kid", "age": 13, "role": "STUDENT"}).age == 13

    def test_unknown_keys_are_ignored(self):
        request = validate_create_user(
            {"name": "Alice", "age": 22, "role": "ADMIN", "id": 99, "email": "a@b.c"}
        )

        assert request.model_dump() == {"name": "Alice", "age": 22, "role": Role.ADMIN}

    def test_every_invalid_field_is_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_user({"name": "", "age": 5, "role": "KING"})

        assert exc_info.value.messages == [
            "name must be longer than or equal to 1 characters",
            "age must not be less than 13",
            ROLE_MESSAGE,
        ]

    def test_missing_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_user({})

        assert exc_info.value.messages == [
            "name should not be empty",
            "age should not be empty",
            "role should not be empty",
        ]

    def test_age_as_string_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_user({"name": "Alice", "age": "22", "role": "STUDENT"})

        assert exc_info.value.messages == ["age must be an integer number"]

    def test_age_as_boolean_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_user({"name": "Alice", "age": True, "role": "STUDENT"})

        assert exc_info.value.messages == ["age must be an integer number"]

    def test_fractional_age_is_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            validate_create_user({"name": "Alice", "age": 22.5, "role": "STUDENT"})

    def test_name_must_be_string(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_user({"name": 42, "age": 22, "role": "STUDENT"})

        assert exc_info.value.messages == ["name must be a string"]

    def test_role_is_case_sensitive(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_user({"name": "Alice", "age": 22, "role": "student"})

        assert exc_info.value.messages == [ROLE_MESSAGE]

    @pytest.mark.parametrize("payload", [[], "Alice", 3, None])
    def test_body_must_be_object(self, payload):
        with pytest.raises(ValidationError) as exc_info:
            validate_create_user(payload)

        assert exc_info.value.messages == ["request body must be a JSON object"]


class TestValidateUpdateUser:
    """Tests for the PATCH /users/{id} body."""

    def test_empty_patch_is_valid(self):
        assert validate_update_user({}).changes() == {}

    def test_single_field(self):
        assert validate_update_user({"age": 27}).changes() == {"age": 27}

    def test_role_is_converted_to_enum(self):
        assert validate_update_user({"role": "ADMIN"}).changes() == {"role": Role.ADMIN}

    def test_null_fields_are_not_changes(self):
        assert validate_update_user({"name": None, "role": "TEACHER"}).changes() == {
            "role": Role.TEACHER
        }

    def test_constraints_still_apply(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_update_user({"name": "", "age": 12})

        assert exc_info.value.messages == [
            "name must be longer than or equal to 1 characters",
            "age must not be less than 13",
        ]

    def test_invalid_role(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_update_user({"role": "JANITOR"})

        assert exc_info.value.messages == [ROLE_MESSAGE]

    def test_body_must_be_object(self):
        with pytest.raises(ValidationError, match="JSON object"):
            validate_update_user(["age", 20])

"""Tests for the exception hierarchy."""

from __future__ import annotations

from forms_validation.exceptions import FormsValidationError, ValidationError


class TestValidationError:
    def test_is_forms_validation_error(self) -> None:
        assert issubclass(ValidationError, FormsValidationError)

    def test_carries_field_errors(self) -> None:
        err = ValidationError({"email": ["Email address is invalid"]})
        assert err.errors == {"email": ["Email address is invalid"]}
        assert "email" in str(err)

    def test_string_becomes_root_error(self) -> None:
        err = ValidationError("form is empty")
        assert err.errors == {"__root__": ["form is empty"]}

    def test_none_becomes_empty(self) -> None:
        assert ValidationError().errors == {}

    def test_to_dict(self) -> None:
        err = ValidationError({"name": ["Must be exactly 5 characters long"]})
        assert err.to_dict() == {
            "error": "VALIDATION_ERROR",
            "errors": {"name": ["Must be exactly 5 characters long"]},
        }


def test_base_to_dict() -> None:
    err = FormsValidationError("boom")
    assert err.to_dict() == {"error": "FormsValidationError", "message": "boom"}

from typing import Any
from unittest.mock import MagicMock

from forms_validation.checks import is_email, is_number_between, is_string_length
from forms_validation.composite import CompositeValidator
from forms_validation.errors import Errors
from forms_validation.ports import IValidator


class SignupValidator:
    def validate(self, data: Any, errors: Errors) -> None:
        is_string_length("username", errors, data["username"], 3, 20)
        is_email("email", errors, data["email"])


class ProfileValidator:
    def validate(self, data: Any, errors: Errors) -> None:
        is_number_between("age", errors, data["age"], 13, 120)
        is_string_length("username", errors, data["username"], 5, 5)


def test_plain_class_satisfies_protocol() -> None:
    assert isinstance(SignupValidator(), IValidator)


def test_composite_validator_success() -> None:
    v1 = MagicMock(spec=IValidator)
    v2 = MagicMock(spec=IValidator)

    composite = CompositeValidator([v1, v2])
    result = composite.validate({"anything": 1})

    assert result.is_valid
    assert result.errors == {}
    v1.validate.assert_called_once()
    v2.validate.assert_called_once()


def test_composite_collects_all_errors() -> None:
    composite = CompositeValidator()
    composite.add(SignupValidator())
    composite.add(ProfileValidator())

    result = composite.validate({"username": "al", "email": "al", "age": 9})

    assert not result.is_valid
    assert result.errors == {
        "username": [
            "Must be between 3 and 20 characters long",
            "Must be exactly 5 characters long",
        ],
        "email": ["Email address is invalid"],
        "age": ["Must be between 13 and 120, but was 9"],
    }


def test_composite_shares_one_accumulator() -> None:
    seen: list[int] = []

    class Recorder:
        def validate(self, data: Any, errors: Errors) -> None:
            seen.append(id(errors))

    composite = CompositeValidator([Recorder(), Recorder()])
    existing: Errors = {"email": ["already registered"]}

    result = composite.validate({}, existing)

    assert seen == [id(existing), id(existing)]
    assert result.errors is existing
    assert result.errors == {"email": ["already registered"]}

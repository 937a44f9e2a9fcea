"""CompositeValidator — chains multiple validators, collects all errors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .result import ValidationResult

if TYPE_CHECKING:
    from .errors import Errors
    from .ports import IValidator

logger = logging.getLogger("forms_validation.composite")


class CompositeValidator:
    """Runs a list of validators against one shared error accumulator.

    Unlike fail-fast validation, every validator runs regardless of earlier
    failures, so the result holds **all** errors of the pass.

    Usage::

        validator = CompositeValidator([SignupValidator(), AddressValidator()])
        result = validator.validate(form)
    """

    def __init__(self, validators: list[IValidator] | None = None) -> None:
        self._validators: list[IValidator] = list(validators or [])

    def add(self, validator: IValidator) -> None:
        """Append a validator to the chain."""
        self._validators.append(validator)

    def validate(self, data: Any, errors: Errors | None = None) -> ValidationResult:
        """Run all validators and return the accumulated result.

        When *errors* is supplied it is used as the accumulator, so messages
        already present are kept and the returned result wraps the same dict.
        """
        accumulator: Errors = {} if errors is None else errors
        for validator in self._validators:
            validator.validate(data, accumulator)

        result = ValidationResult(errors=accumulator)
        if not result.is_valid:
            logger.debug(
                "Validation failed for %d field(s): %s",
                len(accumulator),
                ", ".join(accumulator),
            )
        return result

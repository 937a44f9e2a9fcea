"""Exception hierarchy for forms-validation.

Constraint violations are never raised by the checks themselves; they are
recorded in an ``Errors`` mapping. These exceptions exist for callers that
want to escalate a failed validation pass.
"""

from __future__ import annotations

from typing import Any


class FormsValidationError(Exception):
    """Root exception for the forms-validation package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(FormsValidationError):
    """Raised when a validation pass is escalated into an exception.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "errors": {field: list(msgs) for field, msgs in self.errors.items()},
        }

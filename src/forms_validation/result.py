"""ValidationResult — an ErrorSet with validity and merge helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import Errors, add_error
from .exceptions import ValidationError


def default_errors_factory() -> Errors:
    """Factory for the mutable ``errors`` default of ValidationResult."""
    return {}


@dataclass
class ValidationResult:
    """Collects field-level validation errors.

    ``errors`` is a plain :data:`~forms_validation.errors.Errors` mapping and
    can be handed directly to any check::

        result = ValidationResult()
        is_email("email", result.errors, "not-an-email")
        result.raise_if_invalid()
    """

    errors: Errors = field(default_factory=default_errors_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: Errors) -> ValidationResult:
        return cls(errors=errors)

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another result into a new one, combining all errors."""
        merged = {name: list(msgs) for name, msgs in self.errors.items()}
        for field_name, messages in other.errors.items():
            merged[field_name] = merged.get(field_name, []) + messages
        return ValidationResult(errors=merged)

    def add_error(self, field_name: str, message: str) -> None:
        """Add a single error for *field_name*."""
        add_error(field_name, self.errors, message)

    # ── Escalation ───────────────────────────────────────────────

    def raise_if_invalid(self) -> None:
        """Raise :class:`ValidationError` if any field has errors."""
        if not self.is_valid:
            raise ValidationError({k: list(v) for k, v in self.errors.items()})

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": {k: list(v) for k, v in self.errors.items()},
        }

    def __bool__(self) -> bool:
        return self.is_valid

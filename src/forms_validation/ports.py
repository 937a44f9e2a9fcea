"""IValidator — composable form-validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .errors import Errors


@runtime_checkable
class IValidator(Protocol):
    """Protocol for form validators.

    A validator runs its checks against the shared *errors* accumulator and
    returns nothing. Validators are composable via
    :class:`~forms_validation.composite.CompositeValidator`.
    """

    def validate(self, data: Any, errors: Errors) -> None:
        """Validate *data*, recording every violation in *errors*."""
        ...

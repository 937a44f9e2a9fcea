"""forms-validation — composable field checks with a per-field error set.

Checks never raise on a violation; they append a message to an
:data:`Errors` mapping owned by the caller.
"""

from __future__ import annotations

from .checks import (
    EMAIL_MESSAGE,
    EMAIL_RX,
    is_email,
    is_min_size,
    is_number_between,
    is_regex,
    is_size,
    is_string_length,
)
from .composite import CompositeValidator
from .errors import Errors, add_error
from .exceptions import FormsValidationError, ValidationError
from .ports import IValidator
from .result import ValidationResult

__all__ = [
    # Error set
    "Errors",
    "add_error",
    # Checks
    "EMAIL_MESSAGE",
    "EMAIL_RX",
    "is_email",
    "is_min_size",
    "is_number_between",
    "is_regex",
    "is_size",
    "is_string_length",
    # Results & composition
    "CompositeValidator",
    "IValidator",
    "ValidationResult",
    # Exceptions
    "FormsValidationError",
    "ValidationError",
]

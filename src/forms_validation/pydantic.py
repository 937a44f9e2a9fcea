"""PydanticValidator — folds Pydantic model validation into an ErrorSet."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import add_error

if TYPE_CHECKING:
    from .errors import Errors


class PydanticValidator:
    """Validates raw form data through a Pydantic model class.

    Each Pydantic error becomes one message keyed by its dotted location
    (``address.zip``), or ``__root__`` for model-level errors. Messages are
    appended to the caller's accumulator alongside any field checks.
    """

    def __init__(self, model: type[BaseModel]) -> None:
        self._model = model

    def validate(self, data: Any, errors: Errors) -> None:
        try:
            self._model.model_validate(data)
        except PydanticValidationError as exc:
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
                add_error(loc, errors, error.get("msg", "validation error"))

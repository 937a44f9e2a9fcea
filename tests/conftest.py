"""Shared fixtures for forms-validation tests."""

from __future__ import annotations

import pytest

from forms_validation.errors import Errors


@pytest.fixture
def errors() -> Errors:
    """Fresh, empty error accumulator for one validation pass."""
    return {}

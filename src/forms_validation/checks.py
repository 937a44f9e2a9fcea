"""
Field checks: one function per constraint kind.

Every check follows the same contract::

    check(field, errors, value, *params) -> None

A passing check leaves ``errors`` untouched. A failing check appends exactly
one message under ``field`` through :func:`~forms_validation.errors.add_error`.
Violations are never raised, so a caller can run every check of a pass and
read the complete set of failures afterwards::

    errors: Errors = {}
    is_string_length("username", errors, form["username"], 3, 32)
    is_email("email", errors, form["email"])
    if errors:
        ...
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from .errors import Errors, add_error

if TYPE_CHECKING:
    from collections.abc import Sized

logger = logging.getLogger("forms_validation.checks")

EMAIL_RX: re.Pattern[str] = re.compile(r"^\S+@\S+\Z")
"""Minimal email shape: non-whitespace, ``@``, non-whitespace."""

EMAIL_MESSAGE = "Email address is invalid"


class _Ordered(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=_Ordered)


def _record(field: str, errors: Errors, message: str) -> None:
    logger.debug("Field %r failed validation: %s", field, message)
    add_error(field, errors, message)


def is_string_length(field: str, errors: Errors, value: str, m: int, n: int) -> None:
    """Check that *value* is exactly ``m == n`` characters, or within ``[m, n]``."""
    length = len(value)
    if m <= length <= n:
        return

    if m == n:
        msg = f"Must be exactly {m} characters long"
    else:
        msg = f"Must be between {m} and {n} characters long"
    _record(field, errors, msg)


def is_number_between(field: str, errors: Errors, value: T, m: T, n: T) -> None:
    """Check that *value* equals ``m == n``, or lies within ``[m, n]``.

    Works for any ordered type; integers of any width are the intended use.
    """
    if not (value < m or value > n):
        return

    if m == n:
        msg = f"Must be exactly {m}, but was {value}"
    else:
        msg = f"Must be between {m} and {n}, but was {value}"
    _record(field, errors, msg)


def is_size(field: str, errors: Errors, value: Sized, m: int, n: int) -> None:
    """Check that a sequence or mapping has exactly ``m == n`` entries, or
    between ``m`` and ``n`` entries (inclusive).

    Mappings count keys, sequences count elements.
    """
    size = len(value)
    if m <= size <= n:
        return

    if m == n:
        msg = f"Must have exactly {m} entries, but had {size}"
    else:
        msg = f"Must have between {m} and {n} entries, but had {size}"
    _record(field, errors, msg)


def is_min_size(field: str, errors: Errors, value: Sized, n: int) -> None:
    """Check that a sequence or mapping has at least *n* entries."""
    size = len(value)
    if size >= n:
        return

    _record(
        field,
        errors,
        f"Must have a minimum of {n} {_entry_word(n)}, but had {size}",
    )


def _entry_word(n: int) -> str:
    # singular for n <= 1, including zero
    return "entries" if n > 1 else "entry"


def is_regex(
    field: str,
    errors: Errors,
    value: str,
    pattern: re.Pattern[str] | str,
    message: str,
) -> None:
    """Check that *pattern* matches *value*, recording *message* verbatim if not.

    The match is unanchored (``search``); anchor the pattern to require a
    full match.
    """
    rx = re.compile(pattern) if isinstance(pattern, str) else pattern
    if rx.search(value) is None:
        _record(field, errors, message)


def is_email(field: str, errors: Errors, value: str) -> None:
    """Check *value* against :data:`EMAIL_RX`.

    For a stricter or custom email rule use :func:`is_regex`.
    """
    is_regex(field, errors, value, EMAIL_RX, EMAIL_MESSAGE)


__all__ = [
    "EMAIL_MESSAGE",
    "EMAIL_RX",
    "is_email",
    "is_min_size",
    "is_number_between",
    "is_regex",
    "is_size",
    "is_string_length",
]

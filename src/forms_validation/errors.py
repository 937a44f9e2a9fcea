"""Errors: the per-field message accumulator shared by every check."""

from __future__ import annotations

import threading

Errors = dict[str, list[str]]
"""Field name -> violation messages, in the order the checks ran."""

_append_lock = threading.Lock()


def add_error(field: str, errors: Errors, message: str) -> None:
    """Record *message* against *field* inside *errors*."""
    with _append_lock:
        errors.setdefault(field, []).append(message)

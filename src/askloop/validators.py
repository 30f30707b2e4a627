"""Stock validators for common answer constraints.

Every validator returns None for an acceptable answer and a message string
otherwise, so they can be passed straight to Question(validate=...).
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, Iterable

from askloop.model.question import Validator


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def required(value: Any) -> str | None:
    """Reject None, blank strings and empty collections."""
    if _is_empty(value):
        return "Value is required"
    return None


def min_length(length: int) -> Validator:
    def validate(value: Any) -> str | None:
        if isinstance(value, Sized) and len(value) < length:
            return f"value is too short. Min length is {length}"
        return None

    return validate


def max_length(length: int) -> Validator:
    def validate(value: Any) -> str | None:
        if isinstance(value, Sized) and len(value) > length:
            return f"value is too long. Max length is {length}"
        return None

    return validate


def one_of(choices: Iterable[Any]) -> Validator:
    """Accept only answers contained in ``choices``."""
    allowed = list(choices)

    def validate(value: Any) -> str | None:
        if value not in allowed:
            listed = ", ".join(str(c) for c in allowed)
            return f"{value!r} is not one of: {listed}"
        return None

    return validate


def compose(*validators: Validator) -> Validator:
    """Run validators in order and return the first failure."""

    def validate(value: Any) -> object | None:
        for validator in validators:
            failure = validator(value)
            if failure is not None:
                return failure
        return None

    return validate

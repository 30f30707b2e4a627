"""Type coercion for answers written into annotated attributes."""

from __future__ import annotations

import types
import typing
from collections.abc import Iterable
from typing import Any

_TRUE = frozenset({"1", "true", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "no", "n", "off"})
_COLLECTIONS = (list, tuple, set, frozenset)


class CoercionError(ValueError):
    """Raised when a value cannot be converted to the declared type."""


def coerce_value(expected: Any, value: Any) -> Any:
    """Convert ``value`` to the ``expected`` annotation.

    Values that already match are returned unchanged. Only conversions a
    terminal answer plausibly needs are attempted; anything else raises
    CoercionError.
    """
    if expected is Any or expected is None or expected is object:
        return value

    origin = typing.get_origin(expected)
    if origin is typing.Union or (hasattr(types, "UnionType") and origin is types.UnionType):
        return _coerce_union(typing.get_args(expected), value)
    if origin is typing.Literal:
        if value in typing.get_args(expected):
            return value
        raise CoercionError(f"{value!r} is not one of {typing.get_args(expected)!r}")
    if origin is not None:
        # Parameterized generics (list[int], dict[str, Any], ...) check the container only
        expected = origin
    if not isinstance(expected, type):
        return value

    if isinstance(value, expected) and not (expected is int and isinstance(value, bool)):
        return value
    if expected is bool:
        return _to_bool(value)
    if expected in (int, float):
        return _to_number(expected, value)
    if expected is str:
        if isinstance(value, (int, float, bool)):
            return str(value)
        raise CoercionError(f"expected str, got {type(value).__name__}")
    if expected in _COLLECTIONS:
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return expected(value)
        raise CoercionError(f"expected {expected.__name__}, got {type(value).__name__}")
    raise CoercionError(f"expected {expected.__name__}, got {type(value).__name__}")


def _coerce_union(args: tuple[Any, ...], value: Any) -> Any:
    if value is None:
        if type(None) in args:
            return None
        raise CoercionError("None is not allowed here")
    candidates = [a for a in args if a is not type(None)]
    if any(a is Any or a is object for a in candidates):
        return value
    # Prefer an exact match before trying conversions
    for arg in candidates:
        if _is_plain_class(arg) and isinstance(value, arg):
            return value
    for arg in candidates:
        try:
            return coerce_value(arg, value)
        except CoercionError:
            continue
    names = ", ".join(getattr(a, "__name__", repr(a)) for a in candidates)
    raise CoercionError(f"expected one of ({names}), got {type(value).__name__}")


def _is_plain_class(arg: Any) -> bool:
    return isinstance(arg, type) and typing.get_origin(arg) is None and arg is not Any


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise CoercionError(f"{value!r} is not a yes/no value")
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise CoercionError(f"expected bool, got {type(value).__name__}")


def _to_number(expected: type, value: Any) -> Any:
    if isinstance(value, bool):
        raise CoercionError(f"expected {expected.__name__}, got bool")
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        raise CoercionError(f"expected {expected.__name__}, got {type(value).__name__}")
    if expected is int and isinstance(value, float) and not value.is_integer():
        raise CoercionError(f"{value!r} is not a whole number")
    try:
        return expected(value)
    except (TypeError, ValueError) as exc:
        raise CoercionError(f"{value!r} is not a valid {expected.__name__}") from exc

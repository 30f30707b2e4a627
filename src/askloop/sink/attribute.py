"""Attribute sink: writes answers into dataclasses and plain objects."""

from __future__ import annotations

import dataclasses
import typing
from typing import Any

from askloop.errors import WriteAnswerError
from askloop.sink.coerce import CoercionError, coerce_value

# Dataclass field metadata key that binds a field to a question name.
ANSWER_KEY = "answer"


class AttributeSink:
    """Matches the question name to an attribute and assigns the answer.

    Lookup order:
    1. Dataclass field whose metadata["answer"] equals the name
    2. Attribute with exactly that name
    3. Attribute whose name matches case-insensitively
    """

    def write(self, target: Any, name: str, value: Any) -> None:
        if not name:
            raise WriteAnswerError(
                f"cannot write an unnamed answer into {type(target).__name__}; use a mapping or Ref",
                name=name,
            )
        attr = self.find_attribute(target, name)
        if attr is None:
            raise WriteAnswerError(
                f"{type(target).__name__} has no field for answer {name!r}", name=name
            )

        expected = _type_hints(type(target)).get(attr, Any)
        try:
            value = coerce_value(expected, value)
        except CoercionError as exc:
            raise WriteAnswerError(f"cannot store answer {name!r} in field {attr!r}: {exc}", name=name) from exc

        try:
            setattr(target, attr, value)
        except (AttributeError, TypeError) as exc:
            # Frozen dataclasses raise FrozenInstanceError, a subclass of AttributeError
            raise WriteAnswerError(f"field {attr!r} of {type(target).__name__} is not writable", name=name) from exc

    def find_attribute(self, target: Any, name: str) -> str | None:
        """Return the attribute name that should receive answer ``name``."""
        candidates = _candidate_names(target)

        if dataclasses.is_dataclass(target):
            for f in dataclasses.fields(target):
                if f.metadata.get(ANSWER_KEY) == name:
                    return f.name

        if name in candidates:
            return name

        lowered = name.lower()
        for candidate in candidates:
            if candidate.lower() == lowered:
                return candidate
        return None


def _candidate_names(target: Any) -> list[str]:
    names: list[str] = []
    if dataclasses.is_dataclass(target):
        names.extend(f.name for f in dataclasses.fields(target))
    names.extend(getattr(target, "__dict__", {}).keys())
    for klass in type(target).__mro__:
        names.extend(getattr(klass, "__annotations__", {}).keys())
        slots = getattr(klass, "__slots__", ())
        names.extend([slots] if isinstance(slots, str) else slots)
        # Plain class-level defaults (`color = ""`); methods and properties are not slots
        names.extend(
            attr for attr, default in vars(klass).items()
            if not callable(default) and not hasattr(type(default), "__get__")
        )
    # Private attributes are never answer slots
    seen: dict[str, None] = {}
    for n in names:
        if not n.startswith("_"):
            seen.setdefault(n, None)
    return list(seen)


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        # Unresolvable forward references: fall back to storing values unchanged
        return {}

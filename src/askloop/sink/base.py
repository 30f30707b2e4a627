"""Answer sink protocol, resolution and the public write_answer() entry point."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from askloop.errors import WriteAnswerError
from askloop.sink.attribute import AttributeSink


@runtime_checkable
class AnswerSetter(Protocol):
    """Records that know how to store answers themselves."""

    def write_answer(self, name: str, value: Any) -> None: ...


class AnswerSink(Protocol):
    """Writes one named value into a target of a particular shape."""

    def write(self, target: Any, name: str, value: Any) -> None: ...


@dataclass
class Ref:
    """Single-value holder, the usual target for ask_one().

    Accepts any name, so it can receive the anonymous answer of ask_one().
    """

    value: Any = None

    def write_answer(self, name: str, value: Any) -> None:
        self.value = value


class SetterSink:
    """Delegates to the target's own write_answer()."""

    def write(self, target: Any, name: str, value: Any) -> None:
        try:
            target.write_answer(name, value)
        except (TypeError, ValueError, KeyError) as exc:
            raise WriteAnswerError(
                f"{type(target).__name__} rejected answer {name!r}: {exc}", name=name
            ) from exc


class MappingSink:
    """Inserts the value under its name as a key."""

    def write(self, target: Any, name: str, value: Any) -> None:
        try:
            target[name] = value
        except (TypeError, ValueError, KeyError) as exc:
            raise WriteAnswerError(
                f"cannot store answer {name!r} in {type(target).__name__}: {exc}", name=name
            ) from exc


def resolve_sink(target: Any) -> AnswerSink:
    """Pick the sink for a target by capability.

    Resolution order:
    1. Objects with a write_answer() method
    2. Mutable mappings
    3. Anything else, addressed by attribute
    """
    # 1. Self-describing records
    if isinstance(target, AnswerSetter):
        return SetterSink()
    # 2. Mappings
    if isinstance(target, MutableMapping):
        return MappingSink()
    if isinstance(target, Mapping):
        raise WriteAnswerError(f"cannot write into read-only mapping {type(target).__name__}")
    # 3. Attribute records
    return AttributeSink()


def write_answer(target: Any, name: str, value: Any) -> None:
    """Store ``value`` under ``name`` in ``target``.

    Raises WriteAnswerError when the target has no slot for the name or the
    value does not fit the slot's declared type.
    """
    try:
        resolve_sink(target).write(target, name, value)
    except WriteAnswerError as exc:
        if not exc.name:
            exc.name = name
        raise

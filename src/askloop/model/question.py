"""Question model: the contracts a questionnaire is built from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from askloop.surface import Surface


# Returns None when the answer is acceptable, otherwise a failure reason
# (a message string or an exception instance).
Validator = Callable[[Any], Optional[object]]


@runtime_checkable
class Prompt(Protocol):
    """Protocol for objects that read an answer from the line-editing surface.

    ``prompt`` may be called several times for the same question when the
    answer fails validation. ``cleanup`` is called once, with the accepted
    answer, so the prompt can finalize what it left on screen.
    """

    def prompt(self, surface: Surface) -> Any: ...

    def cleanup(self, surface: Surface, answer: Any) -> None: ...


@dataclass(frozen=True)
class Question:
    """A named prompt with an optional validator."""

    name: str
    prompt: Prompt
    validate: Validator | None = None


def failure_message(failure: object) -> str:
    """Return the user-facing message for a validator failure."""
    if isinstance(failure, BaseException):
        return str(failure) or type(failure).__name__
    return str(failure)

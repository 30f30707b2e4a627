"""RecordingPrompt: wraps another prompt and records every exchange."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from askloop.model.question import Prompt
from askloop.surface import Surface


@dataclass(frozen=True)
class Attempt:
    """A recorded read: the raw answer, before validation."""

    answer: Any


class RecordingPrompt:
    """Prompt decorator that records all attempts and the final cleanup.

    Wraps an inner prompt. Every call is forwarded, and each raw answer is
    recorded, including those later rejected by the validator.
    """

    def __init__(self, inner: Prompt) -> None:
        self._inner = inner
        self._attempts: list[Attempt] = []
        self.final: Any = None
        self.cleaned_up = False

    def prompt(self, surface: Surface) -> Any:
        answer = self._inner.prompt(surface)
        self._attempts.append(Attempt(answer=answer))
        return answer

    def cleanup(self, surface: Surface, answer: Any) -> None:
        self.final = answer
        self.cleaned_up = True
        self._inner.cleanup(surface, answer)

    def attempts(self) -> list[Attempt]:
        """Return the list of all recorded attempts."""
        return list(self._attempts)

    def clear(self) -> None:
        self._attempts.clear()
        self.final = None
        self.cleaned_up = False

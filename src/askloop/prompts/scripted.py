"""ScriptedPrompt: replays a fixed sequence of answers."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable

from askloop.surface import Surface


class ScriptedPrompt:
    """Prompt that returns pre-recorded answers in order.

    Useful for driving a questionnaire without a person at the keyboard.
    Once the script runs out, further reads raise EOFError, the same way a
    closed terminal would. An answer that is an exception instance is raised
    instead of returned.
    """

    def __init__(self, answers: Iterable[Any]) -> None:
        self._answers: deque[Any] = deque(answers)
        self.cleaned_up: list[Any] = []

    @classmethod
    def fixed(cls, answer: Any) -> ScriptedPrompt:
        """A prompt that answers once with ``answer``."""
        return cls([answer])

    def prompt(self, surface: Surface) -> Any:
        if not self._answers:
            raise EOFError("scripted prompt has no answers left")
        answer = self._answers.popleft()
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def cleanup(self, surface: Surface, answer: Any) -> None:
        self.cleaned_up.append(answer)

    @property
    def remaining(self) -> int:
        return len(self._answers)

"""Error hierarchy for askloop."""

from __future__ import annotations


class AskError(Exception):
    """Base error for all errors raised by askloop itself."""


class MissingTargetError(AskError):
    """Raised when ask() is called without a place to record the answers."""

    def __init__(self, message: str = "cannot call ask() with no target to record the answers") -> None:
        super().__init__(message)


class SurfaceUnavailableError(AskError):
    """The line-editing surface could not be acquired (e.g. not a terminal)."""


class WriteAnswerError(AskError):
    """A validated answer could not be stored in the result record."""

    def __init__(self, message: str, *, name: str = "") -> None:
        super().__init__(message)
        self.name = name


class TooManyAttemptsError(AskError):
    """The configured attempt cap was reached before a valid answer arrived."""

    def __init__(self, name: str, attempts: int) -> None:
        super().__init__(f"no valid answer for {name!r} after {attempts} attempts")
        self.name = name
        self.attempts = attempts

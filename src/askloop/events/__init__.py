"""Questionnaire lifecycle events."""

from askloop.events.bus import EventBus
from askloop.events.types import (
    AnswerRejected,
    AnswerWritten,
    AskAborted,
    AskCompleted,
    AskStarted,
    CleanupFailed,
    QuestionStarted,
)

__all__ = [
    "EventBus",
    "AskStarted",
    "AskCompleted",
    "AskAborted",
    "QuestionStarted",
    "AnswerRejected",
    "CleanupFailed",
    "AnswerWritten",
]

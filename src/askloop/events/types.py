"""Event types emitted while a questionnaire runs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AskStarted:
    question_count: int


@dataclass(frozen=True)
class AskCompleted:
    question_count: int


@dataclass(frozen=True)
class AskAborted:
    name: str
    error: str


@dataclass(frozen=True)
class QuestionStarted:
    name: str
    index: int


@dataclass(frozen=True)
class AnswerRejected:
    name: str
    attempt: int
    message: str


@dataclass(frozen=True)
class CleanupFailed:
    name: str
    error: str


@dataclass(frozen=True)
class AnswerWritten:
    name: str
    attempts: int

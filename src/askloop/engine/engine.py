"""Ask engine: drives each question through prompt, validation, cleanup and write."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import click

from askloop.engine.config import AskConfig
from askloop.errors import MissingTargetError, TooManyAttemptsError
from askloop.events import types as events
from askloop.events.bus import EventBus
from askloop.model.question import Prompt, Question, Validator, failure_message
from askloop.sink import write_answer
from askloop.surface import Surface

logger = logging.getLogger("askloop")


class AskEngine:
    """Runs questionnaires against a single line-editing surface per call.

    Every fatal error (prompt, renderer, sink, surface acquisition) propagates
    to the caller unchanged. Answers already written stay in the target.
    """

    def __init__(self, config: AskConfig | None = None, *, event_bus: EventBus | None = None) -> None:
        self.config = config or AskConfig()
        self.event_bus = event_bus or EventBus()

    def ask(self, questions: Sequence[Question], target: Any) -> None:
        """Ask every question in order and write each valid answer into ``target``."""
        if target is None:
            raise MissingTargetError()

        surface = self.config.surface_factory()
        self.event_bus.emit(events.AskStarted(question_count=len(questions)))

        for index, question in enumerate(questions):
            try:
                self._ask_question(surface, index, question, target)
            except BaseException as exc:
                logger.debug("Aborting at question %r: %r", question.name, exc)
                self.event_bus.emit(events.AskAborted(name=question.name, error=repr(exc)))
                raise

        self.event_bus.emit(events.AskCompleted(question_count=len(questions)))

    def ask_one(self, prompt: Prompt, target: Any, validate: Validator | None = None) -> None:
        """Ask a single anonymous question; the answer is written under the empty name."""
        self.ask([Question(name="", prompt=prompt, validate=validate)], target)

    # --- per-question state machine -------------------------------------------

    def _ask_question(self, surface: Surface, index: int, question: Question, target: Any) -> None:
        self.event_bus.emit(events.QuestionStarted(name=question.name, index=index))

        # Rendering
        answer = question.prompt.prompt(surface)
        attempts = 1

        # Validating -> (Invalid -> Rendering)*
        if question.validate is not None:
            failure = question.validate(answer)
            while failure is not None:
                self._reject(question, attempts, failure)
                answer = question.prompt.prompt(surface)
                attempts += 1
                failure = question.validate(answer)

        # CleaningUp
        try:
            question.prompt.cleanup(surface, answer)
        except Exception as exc:
            logger.warning("Cleanup failed for question %r: %s", question.name, exc)
            self.event_bus.emit(events.CleanupFailed(name=question.name, error=str(exc)))

        # Written
        write_answer(target, question.name, answer)
        logger.debug("Wrote answer for %r after %d attempt(s)", question.name, attempts)
        self.event_bus.emit(events.AnswerWritten(name=question.name, attempts=attempts))

    def _reject(self, question: Question, attempt: int, failure: object) -> None:
        """Show the failure to the user, or give up once the attempt cap is hit."""
        message = failure_message(failure)
        logger.debug("Answer for %r rejected (attempt %d): %s", question.name, attempt, message)
        self.event_bus.emit(events.AnswerRejected(name=question.name, attempt=attempt, message=message))

        out = self.config.renderer.render(self.config.error_template, failure)
        click.echo(out, nl=False, file=self.config.output, color=self.config.color)

        max_attempts = self.config.max_attempts
        if max_attempts is not None and attempt >= max_attempts:
            raise TooManyAttemptsError(question.name, attempt)


def ask(
    questions: Sequence[Question],
    target: Any,
    *,
    config: AskConfig | None = None,
    event_bus: EventBus | None = None,
) -> None:
    """Ask ``questions`` in order, writing each validated answer into ``target``."""
    AskEngine(config, event_bus=event_bus).ask(questions, target)


def ask_one(
    prompt: Prompt,
    target: Any,
    validate: Validator | None = None,
    *,
    config: AskConfig | None = None,
    event_bus: EventBus | None = None,
) -> None:
    """Ask a single question. Equivalent to ask() with one unnamed question."""
    AskEngine(config, event_bus=event_bus).ask_one(prompt, target, validate)

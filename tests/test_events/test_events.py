"""Tests for the event bus and the events emitted by the engine."""

from __future__ import annotations

from askloop.engine import ask
from askloop.events import (
    AnswerRejected,
    AnswerWritten,
    AskCompleted,
    AskStarted,
    CleanupFailed,
    EventBus,
    QuestionStarted,
)
from askloop.model.question import Question
from askloop.prompts import CallbackPrompt, ScriptedPrompt
from askloop.validators import one_of


class TestEventBus:
    def test_typed_listener(self) -> None:
        bus = EventBus()
        seen: list = []
        bus.subscribe(AskStarted, seen.append)

        bus.emit(AskStarted(question_count=1))
        bus.emit(AskCompleted(question_count=1))

        assert seen == [AskStarted(question_count=1)]

    def test_wildcard_before_typed(self) -> None:
        bus = EventBus()
        order: list[str] = []
        bus.subscribe(AskStarted, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("all"))

        bus.emit(AskStarted(question_count=0))

        assert order == ["all", "typed"]

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        seen: list = []
        unsubscribe = bus.subscribe(AskStarted, seen.append)
        stop_all = bus.on_all(seen.append)

        unsubscribe()
        stop_all()
        bus.emit(AskStarted(question_count=0))

        assert seen == []

    def test_unsubscribe_twice_is_harmless(self) -> None:
        bus = EventBus()
        seen: list = []
        unsubscribe = bus.subscribe(AskStarted, seen.append)
        stop_all = bus.on_all(seen.append)

        unsubscribe()
        unsubscribe()
        stop_all()
        stop_all()
        bus.emit(AskStarted(question_count=0))

        assert seen == []

    def test_unsubscribe_leaves_other_listeners(self) -> None:
        bus = EventBus()
        first: list = []
        second: list = []
        unsubscribe = bus.subscribe(AskStarted, first.append)
        bus.subscribe(AskStarted, second.append)

        unsubscribe()
        unsubscribe()
        bus.emit(AskStarted(question_count=0))

        assert first == []
        assert second == [AskStarted(question_count=0)]


class TestEngineEvents:
    def test_full_sequence(self, config) -> None:
        bus = EventBus()
        seen: list = []
        bus.on_all(seen.append)

        def broken_cleanup(surface, answer):
            raise RuntimeError("boom")

        questions = [
            Question(name="a", prompt=ScriptedPrompt(["x", "ok"]), validate=one_of(["ok"])),
            Question(name="b", prompt=CallbackPrompt(lambda s: 1, cleanup=broken_cleanup)),
        ]

        ask(questions, {}, config=config, event_bus=bus)

        assert seen == [
            AskStarted(question_count=2),
            QuestionStarted(name="a", index=0),
            AnswerRejected(name="a", attempt=1, message="'x' is not one of: ok"),
            AnswerWritten(name="a", attempts=2),
            QuestionStarted(name="b", index=1),
            CleanupFailed(name="b", error="boom"),
            AnswerWritten(name="b", attempts=1),
            AskCompleted(question_count=2),
        ]

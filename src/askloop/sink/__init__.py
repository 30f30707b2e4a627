"""Answer sinks: writing named answers into caller-owned records."""

from askloop.sink.attribute import ANSWER_KEY, AttributeSink
from askloop.sink.base import (
    AnswerSetter,
    AnswerSink,
    MappingSink,
    Ref,
    SetterSink,
    resolve_sink,
    write_answer,
)
from askloop.sink.coerce import CoercionError, coerce_value

__all__ = [
    "ANSWER_KEY",
    "AnswerSetter",
    "AnswerSink",
    "AttributeSink",
    "CoercionError",
    "MappingSink",
    "Ref",
    "SetterSink",
    "coerce_value",
    "resolve_sink",
    "write_answer",
]

"""Error renderer: formats validation failures for the user."""

from __future__ import annotations

from typing import Protocol

import click
from jinja2 import Environment, StrictUndefined

from askloop.model.question import failure_message

DEFAULT_ERROR_TEMPLATE = (
    '{{ color("red") }}✘ Sorry, your reply was invalid: {{ error }}{{ color("reset") }}\n'
)


class ErrorRenderer(Protocol):
    """Protocol for objects that turn a validation failure into display text."""

    def render(self, template: str, failure: object) -> str: ...


def color(name: str) -> str:
    """Return the ANSI escape sequence for a color name, or a full reset."""
    if name == "reset":
        return click.style("", reset=True)
    return click.style("", fg=name, reset=False)


class TemplateRenderer:
    """Renders error templates with Jinja2.

    The template sees ``error`` (the failure message), ``failure`` (the raw
    failure object) and a ``color(name)`` helper. Template errors propagate.
    """

    def __init__(self, environment: Environment | None = None) -> None:
        self.environment = environment or Environment(
            undefined=StrictUndefined, keep_trailing_newline=True
        )
        self.environment.globals.setdefault("color", color)

    def render(self, template: str, failure: object) -> str:
        return self.environment.from_string(template).render(
            error=failure_message(failure), failure=failure
        )

"""Line-editing surface: the terminal handle shared by every prompt in a run."""

from __future__ import annotations

import sys
from typing import IO, Callable

import click
from prompt_toolkit import PromptSession

from askloop.errors import SurfaceUnavailableError


class Surface:
    """Handle through which prompts read lines and keystrokes.

    Wraps a single prompt_toolkit session so history and key bindings are
    shared across all questions of one ask() call.
    """

    def __init__(self, session: PromptSession, *, output: IO[str] | None = None) -> None:
        self.session = session
        self._output = output

    def read_line(self, message: str = "", *, default: str = "", password: bool = False) -> str:
        """Read one edited line. Raises EOFError / KeyboardInterrupt on ^D / ^C."""
        return self.session.prompt(message, default=default, is_password=password)

    def read_key(self) -> str:
        """Read a single keystroke without waiting for Enter."""
        return click.getchar()

    def write(self, text: str) -> None:
        click.echo(text, nl=False, file=self._output)


SurfaceFactory = Callable[[], Surface]


def acquire_surface() -> Surface:
    """Acquire the terminal for one questionnaire run.

    Raises SurfaceUnavailableError when stdin or stdout is not attached to an
    interactive terminal. Errors raised by prompt_toolkit while opening the
    terminal are propagated unchanged.
    """
    if not sys.stdin.isatty():
        raise SurfaceUnavailableError("stdin is not an interactive terminal")
    if not sys.stdout.isatty():
        raise SurfaceUnavailableError("stdout is not an interactive terminal")
    return Surface(PromptSession())

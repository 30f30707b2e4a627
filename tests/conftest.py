from __future__ import annotations

import io

import pytest

from askloop.engine.config import AskConfig


class FakeSurface:
    """In-memory stand-in for the terminal surface."""

    def __init__(self) -> None:
        self.written: list[str] = []
        self.lines: list[str] = []

    def read_line(self, message: str = "", *, default: str = "", password: bool = False) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def read_key(self) -> str:
        return "\r"

    def write(self, text: str) -> None:
        self.written.append(text)


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def acquired() -> list[FakeSurface]:
    """Every surface handed out by the config's factory, in order."""
    return []


@pytest.fixture
def config(surface, output, acquired) -> AskConfig:
    def factory() -> FakeSurface:
        acquired.append(surface)
        return surface

    return AskConfig(surface_factory=factory, output=output, color=False)

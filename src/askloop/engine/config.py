"""Engine configuration: error template, renderer, terminal factory, output and attempt cap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO

from askloop.render import DEFAULT_ERROR_TEMPLATE, ErrorRenderer, TemplateRenderer
from askloop.surface import SurfaceFactory, acquire_surface


@dataclass(frozen=True)
class AskConfig:
    error_template: str = DEFAULT_ERROR_TEMPLATE
    renderer: ErrorRenderer = field(default_factory=TemplateRenderer)
    surface_factory: SurfaceFactory = acquire_surface
    output: IO[str] | None = None  # None = click's stdout
    color: bool | None = None  # None = strip ANSI unless output is a terminal
    max_attempts: int | None = None  # None = re-prompt until the answer is valid

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")

"""askloop: an interactive questionnaire engine for the terminal."""

__version__ = "0.1.0"

from askloop.engine import AskConfig, AskEngine, ask, ask_one  # noqa: E402
from askloop.errors import (  # noqa: E402
    AskError,
    MissingTargetError,
    SurfaceUnavailableError,
    TooManyAttemptsError,
    WriteAnswerError,
)
from askloop.model import Prompt, Question, Validator  # noqa: E402
from askloop.render import DEFAULT_ERROR_TEMPLATE, ErrorRenderer, TemplateRenderer  # noqa: E402
from askloop.sink import Ref, write_answer  # noqa: E402
from askloop.surface import Surface, acquire_surface  # noqa: E402

__all__ = [
    "__version__",
    "ask",
    "ask_one",
    "AskConfig",
    "AskEngine",
    "AskError",
    "MissingTargetError",
    "SurfaceUnavailableError",
    "TooManyAttemptsError",
    "WriteAnswerError",
    "Prompt",
    "Question",
    "Validator",
    "DEFAULT_ERROR_TEMPLATE",
    "ErrorRenderer",
    "TemplateRenderer",
    "Ref",
    "write_answer",
    "Surface",
    "acquire_surface",
]

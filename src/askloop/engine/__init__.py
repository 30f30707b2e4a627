"""Ask engine: the ask/validate/retry loop and its configuration."""

from askloop.engine.config import AskConfig
from askloop.engine.engine import AskEngine, ask, ask_one

__all__ = ["AskConfig", "AskEngine", "ask", "ask_one"]

"""CallbackPrompt: delegates to user-supplied functions."""

from __future__ import annotations

from typing import Any, Callable

from askloop.surface import Surface


class CallbackPrompt:
    """Prompt that delegates reading (and optionally cleanup) to callbacks.

    The read callback receives the surface and must return the raw answer.
    """

    def __init__(
        self,
        read: Callable[[Surface], Any],
        cleanup: Callable[[Surface, Any], None] | None = None,
    ) -> None:
        self._read = read
        self._cleanup = cleanup

    def prompt(self, surface: Surface) -> Any:
        return self._read(surface)

    def cleanup(self, surface: Surface, answer: Any) -> None:
        if self._cleanup is not None:
            self._cleanup(surface, answer)

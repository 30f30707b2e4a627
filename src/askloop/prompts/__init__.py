"""Prompt adapters: callers' functions and scripted answers as prompts."""

from askloop.prompts.callback import CallbackPrompt
from askloop.prompts.recording import Attempt, RecordingPrompt
from askloop.prompts.scripted import ScriptedPrompt

__all__ = ["CallbackPrompt", "ScriptedPrompt", "RecordingPrompt", "Attempt"]

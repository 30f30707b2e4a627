"""Core data model: questions, prompts and validators."""

from askloop.model.question import Prompt, Question, Validator, failure_message

__all__ = ["Prompt", "Question", "Validator", "failure_message"]

"""Tests for the error renderer and its default template."""

from __future__ import annotations

import pytest
from jinja2 import TemplateSyntaxError, UndefinedError

from askloop.render import DEFAULT_ERROR_TEMPLATE, TemplateRenderer, color


class TestColor:
    def test_red(self) -> None:
        assert color("red") == "\x1b[31m"

    def test_reset(self) -> None:
        assert color("reset") == "\x1b[0m"

    def test_unknown_color(self) -> None:
        with pytest.raises(TypeError):
            color("octarine")


class TestTemplateRenderer:
    def test_default_template(self) -> None:
        out = TemplateRenderer().render(DEFAULT_ERROR_TEMPLATE, "Value is required")

        assert out == "\x1b[31m✘ Sorry, your reply was invalid: Value is required\x1b[0m\n"

    def test_exception_failure(self) -> None:
        out = TemplateRenderer().render("{{ error }}", ValueError("too short"))

        assert out == "too short"

    def test_exception_without_message_uses_class_name(self) -> None:
        out = TemplateRenderer().render("{{ error }}", KeyError())

        assert out == "KeyError"

    def test_raw_failure_available(self) -> None:
        out = TemplateRenderer().render("{{ failure.args[0] }}", ValueError("raw"))

        assert out == "raw"

    def test_syntax_error_propagates(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            TemplateRenderer().render("{{ error ", "x")

    def test_undefined_variable_propagates(self) -> None:
        with pytest.raises(UndefinedError):
            TemplateRenderer().render("{{ nope }}", "x")

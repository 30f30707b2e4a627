"""Tests for the stock validators."""

from __future__ import annotations

import pytest

from askloop.validators import compose, max_length, min_length, one_of, required


class TestRequired:
    @pytest.mark.parametrize("value", [None, "", "   ", [], set()])
    def test_rejects_empty(self, value) -> None:
        assert required(value) == "Value is required"

    @pytest.mark.parametrize("value", ["x", [0], 0, False])
    def test_accepts_present(self, value) -> None:
        assert required(value) is None


class TestLength:
    def test_min_length(self) -> None:
        validate = min_length(3)
        assert validate("ab") == "value is too short. Min length is 3"
        assert validate("abc") is None

    def test_max_length(self) -> None:
        validate = max_length(2)
        assert validate([1, 2, 3]) == "value is too long. Max length is 2"
        assert validate([1, 2]) is None

    def test_unsized_values_pass(self) -> None:
        assert min_length(3)(7) is None
        assert max_length(0)(7) is None


class TestOneOf:
    def test_accepts_member(self) -> None:
        assert one_of(["red", "blue"])("red") is None

    def test_rejects_other(self) -> None:
        assert one_of(["red", "blue"])("green") == "'green' is not one of: red, blue"

    def test_accepts_generator(self) -> None:
        validate = one_of(c for c in "ab")
        assert validate("a") is None
        assert validate("b") is None


class TestCompose:
    def test_first_failure_wins(self) -> None:
        validate = compose(required, min_length(5))
        assert validate("") == "Value is required"
        assert validate("abc") == "value is too short. Min length is 5"
        assert validate("abcdef") is None

    def test_empty_compose_accepts_anything(self) -> None:
        assert compose()(None) is None

    def test_passes_through_exception_failures(self) -> None:
        error = ValueError("bad")
        validate = compose(lambda v: error)
        assert validate("x") is error

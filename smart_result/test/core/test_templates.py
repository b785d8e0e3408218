"""Tests for smart_result.core.templates module."""

from __future__ import annotations

import pickle

import pytest

from smart_result.core.result import Err, Ok
from smart_result.core.templates import (
    TemplateFormatError,
    TemplateInfo,
    format_template,
    render_template,
    scan_template,
)


class TestFormatTemplate:
    def test_single_argument(self) -> None:
        assert format_template("User not found: %s", ["123"]) == Ok("User not found: 123")

    def test_arguments_consumed_in_order(self) -> None:
        assert format_template("Product %s out of stock, %d left", ("Widget", 3)) == Ok(
            "Product Widget out of stock, 3 left"
        )

    def test_no_arguments_returns_template_unchanged(self) -> None:
        assert format_template("User not found: %s", ()) == Ok("User not found: %s")
        assert format_template("Progress at 50%", []) == Ok("Progress at 50%")

    def test_special_characters_in_arguments(self) -> None:
        assert format_template("Invalid format: %s", ["<a href='x'>%d</a>"]) == Ok(
            "Invalid format: <a href='x'>%d</a>"
        )

    def test_too_few_arguments(self) -> None:
        result = format_template("%s and %s", ["one"])
        assert isinstance(result, Err)
        assert isinstance(result.error, TemplateFormatError)

    def test_too_many_arguments(self) -> None:
        result = format_template("Account is locked", ["extra"])
        assert isinstance(result, Err)
        assert result.error.template == "Account is locked"
        assert result.error.args_given == ("extra",)

    def test_type_mismatch(self) -> None:
        result = format_template("minimum %d characters", ["eight"])
        assert isinstance(result, Err)
        assert isinstance(result.error.__cause__, TypeError)

    def test_error_message_names_template(self) -> None:
        result = format_template("%s and %s", ["one"])
        assert isinstance(result, Err)
        assert "'%s and %s'" in str(result.error)
        assert "1 argument(s)" in str(result.error)


class TestRenderTemplate:
    def test_returns_message(self) -> None:
        assert render_template("Order not found: %s", ("A1",)) == "Order not found: A1"

    def test_raises_on_mismatch(self) -> None:
        with pytest.raises(TemplateFormatError):
            render_template("%s and %s", ("one",))

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            render_template("%d", ("x",))

    def test_error_pickle_round_trip(self) -> None:
        with pytest.raises(TemplateFormatError) as info:
            render_template("%s and %s", ("one",))
        restored = pickle.loads(pickle.dumps(info.value))
        assert isinstance(restored, TemplateFormatError)
        assert restored.template == "%s and %s"
        assert restored.args_given == ("one",)
        assert restored.reason == info.value.reason
        assert str(restored) == str(info.value)


class TestScanTemplate:
    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("No placeholders", 0),
            ("User not found: %s", 1),
            ("Product %s out of stock, %d left", 2),
            ("100%% sure about %s", 1),
            ("%-10s|%05.2f", 2),
            ("%*d", 2),
        ],
    )
    def test_positional_counts(self, template: str, expected: int) -> None:
        assert scan_template(template) == Ok(TemplateInfo(positional=expected))

    def test_named_placeholders(self) -> None:
        result = scan_template("Hello %(name)s, you are %(age)d")
        assert result == Ok(TemplateInfo(positional=0, named=("name", "age")))

    @pytest.mark.parametrize("template", ["Progress at 50%", "bad %q conversion"])
    def test_invalid_templates(self, template: str) -> None:
        result = scan_template(template)
        assert isinstance(result, Err)
        assert "invalid placeholder" in result.error

"""Unit tests for length coercion."""

import logging

import pytest

from lasercut.application.config import coerce_floats, parse_float


class TestParseFloat:
    """Tests for parse_float function."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12", 12.0),
            ("12.5", 12.5),
            (".5", 0.5),
            ("-3", -3.0),
            (" 7 ", 7.0),
            ("1e2", 100.0),
        ],
    )
    def test_numeric_strings(self, text: str, expected: float) -> None:
        """Plain numbers parse exactly."""
        assert parse_float(text) == expected

    def test_leading_number_kept(self) -> None:
        """Trailing garbage after a number is ignored."""
        assert parse_float("3mm") == 3.0

    @pytest.mark.parametrize("text", ["abc", "", "inf", "nan"])
    def test_non_numeric_is_zero(self, text: str) -> None:
        """Strings without a leading number read as zero."""
        assert parse_float(text) == 0.0

    def test_non_numeric_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Falling back to zero is reported."""
        with caplog.at_level(logging.WARNING):
            parse_float("abc")

        assert "abc" in caplog.text


class TestCoerceFloats:
    """Tests for coerce_floats function."""

    def test_converts_length_strings(self) -> None:
        """Every string length becomes a float."""
        result = coerce_floats(
            {"width": "10", "margin": "2.5", "stroke": "0.01", "file": "10"}
        )

        assert result["width"] == 10.0
        assert isinstance(result["width"], float)
        assert result["margin"] == 2.5
        assert result["stroke"] == 0.01
        assert result["file"] == "10"

    def test_numbers_untouched(self) -> None:
        """Values that are already numbers are left as they are."""
        result = coerce_floats({"width": 10, "height": 2.5})

        assert result["width"] == 10
        assert isinstance(result["width"], int)
        assert result["height"] == 2.5

    def test_absent_fields_stay_absent(self) -> None:
        """Missing lengths are not introduced."""
        assert coerce_floats({"width": "1"}) == {"width": 1.0}

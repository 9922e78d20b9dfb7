"""Unit tests for the size shorthand parser."""

from lasercut.application.config import SizeSpec, parse_size, parse_size_string


class TestParseSizeString:
    """Tests for parse_size_string function."""

    def test_integer_parts(self) -> None:
        """All five parts are returned as text."""
        assert parse_size_string("100x50x30/3/5") == SizeSpec(
            width="100", height="50", depth="30", thickness="3", notch="5"
        )

    def test_decimal_parts(self) -> None:
        """Decimals are accepted in every part."""
        spec = parse_size_string("4.5x3x2.25/0.125/0.5")

        assert spec is not None
        assert spec.width == "4.5"
        assert spec.depth == "2.25"
        assert spec.thickness == "0.125"
        assert spec.notch == "0.5"

    def test_non_matching_strings(self) -> None:
        """Strings without the shorthand yield None."""
        assert parse_size_string("100x50x30") is None
        assert parse_size_string("100x50/3/5") is None
        assert parse_size_string("large") is None

    def test_leading_text_ignored(self) -> None:
        """Only the matched shorthand is split."""
        assert parse_size_string("9/1x2x3/4/5") == SizeSpec(
            width="1", height="2", depth="3", thickness="4", notch="5"
        )
        assert parse_size_string("box/10x20x30/3/5 please") == SizeSpec(
            width="10", height="20", depth="30", thickness="3", notch="5"
        )

    def test_non_strings(self) -> None:
        """Non-string values yield None."""
        assert parse_size_string(100) is None
        assert parse_size_string(None) is None


class TestParseSize:
    """Tests for parse_size function."""

    def test_expands_and_removes_size(self) -> None:
        """A matching size becomes five fields and disappears."""
        result = parse_size({"size": "100x50x30/3/5", "file": "out.pdf"})

        assert "size" not in result
        assert result == {
            "width": "100",
            "height": "50",
            "depth": "30",
            "thickness": "3",
            "notch": "5",
            "file": "out.pdf",
        }

    def test_overwrites_existing_fields(self) -> None:
        """Expanded values replace explicitly given dimensions."""
        result = parse_size({"size": "1x2x3/4/5", "width": 99.0, "notch": 7})

        assert result["width"] == "1"
        assert result["notch"] == "5"

    def test_non_matching_size_left_untouched(self) -> None:
        """An unparsable size is passed through unchanged."""
        result = parse_size({"size": "big box", "width": 10})

        assert result == {"size": "big box", "width": 10}

    def test_no_size(self) -> None:
        """Options without size are returned unchanged."""
        assert parse_size({"width": 10}) == {"width": 10}

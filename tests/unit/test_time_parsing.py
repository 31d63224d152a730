"""Tests for time_tiny.time_parsing module."""

from time_tiny.time_parsing import format_time_components, match_time_string


class TestMatchTimeString:
    """Tests for match_time_string function."""

    def test_valid(self) -> None:
        """Splits a well formed string into integers."""
        assert match_time_string("14:30:05") == (14, 30, 5)

    def test_midnight(self) -> None:
        """Test parsing midnight."""
        assert match_time_string("00:00:00") == (0, 0, 0)

    def test_no_range_check(self) -> None:
        """Digits outside clock ranges still match."""
        assert match_time_string("24:60:61") == (24, 60, 61)

    def test_missing_seconds(self) -> None:
        """HH:MM without seconds does not match."""
        assert match_time_string("14:30") is None

    def test_trailing_newline(self) -> None:
        """A trailing newline does not match."""
        assert match_time_string("14:30:00\n") is None

    def test_three_digit_component(self) -> None:
        """Components must be exactly two digits."""
        assert match_time_string("100:00:00") is None


class TestFormatTimeComponents:
    """Tests for format_time_components function."""

    def test_pads(self) -> None:
        assert format_time_components(1, 2, 3) == "01:02:03"

    def test_widens(self) -> None:
        assert format_time_components(123, 4, 1000) == "123:04:1000"

    def test_negative(self) -> None:
        """Negative components keep their sign within the minimum width."""
        assert format_time_components(-1, 0, 0) == "-1:00:00"

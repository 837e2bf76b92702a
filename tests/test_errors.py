"""Tests for error messages."""

import pytest

from sharerecover.errors import (
    DuplicateXCoordinate,
    NonIntegerResult,
    RecoveryError,
    format_int,
)


class TestFormatInt:
    """Tests for format_int."""

    def test_small_values_printed(self):
        assert format_int(0) == "0"
        assert format_int(-42) == "-42"
        assert format_int(2**256) == str(2**256)

    def test_large_values_summarized(self):
        text = format_int(36**3000)
        assert text.startswith("<")
        assert text.endswith("-digit integer>")

    def test_large_negative_keeps_sign(self):
        assert format_int(-(2**20000)).startswith("-<")


class TestErrorMessages:
    """Errors build their messages without converting huge ints to text."""

    def test_non_integer_result(self):
        err = NonIntegerResult(2 * 36**3000 - 1, 2)
        assert "digit integer>/2" in str(err)
        assert isinstance(err, RecoveryError)

    def test_duplicate_x(self):
        err = DuplicateXCoordinate(10**5000)
        assert "digit integer" in str(err)

    def test_all_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            raise NonIntegerResult(1, 2)

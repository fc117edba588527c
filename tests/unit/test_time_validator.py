# File: tests/unit/test_time_validator.py
"""
Unit tests for start/end time validation.
"""

import pytest
from src.processors.time_validator import (
    validate_time_range,
    MISSING_TIME_MESSAGE,
    INVALID_FORMAT_MESSAGE,
    START_AFTER_END_MESSAGE,
    END_BEFORE_START_MESSAGE,
)


class TestValidateTimeRange:
    """Tests for validate_time_range."""

    @pytest.mark.parametrize("start, end", [
        ("09:00", "10:00"),
        ("00:00", "23:59"),
        ("13:59", "14:00"),
    ])
    def test_start_before_end_is_valid(self, start, end):
        result = validate_time_range(start, end)

        assert result.is_valid is True
        assert result.start_error is None
        assert result.end_error is None

    @pytest.mark.parametrize("start, end", [
        ("10:00", "10:00"),
        ("11:00", "10:00"),
        ("23:59", "00:00"),
    ])
    def test_start_not_before_end_reports_both_fields(self, start, end):
        result = validate_time_range(start, end)

        assert result.is_valid is False
        assert result.start_error == START_AFTER_END_MESSAGE
        assert result.end_error == END_BEFORE_START_MESSAGE

    @pytest.mark.parametrize("start, end", [
        ("", "10:00"),
        ("10:00", ""),
        ("", ""),
        (None, "10:00"),
        ("   ", "10:00"),
    ])
    def test_empty_value_reports_both_fields(self, start, end):
        result = validate_time_range(start, end)

        assert result.start_error == MISSING_TIME_MESSAGE
        assert result.end_error == MISSING_TIME_MESSAGE

    def test_malformed_value_reports_both_fields(self):
        result = validate_time_range("9시", "10:00")

        assert result.start_error == INVALID_FORMAT_MESSAGE
        assert result.end_error == INVALID_FORMAT_MESSAGE

    def test_validation_is_repeatable(self):
        """Called on every keystroke, so the same input must give the same answer."""
        assert validate_time_range("11:00", "10:00") == validate_time_range("11:00", "10:00")

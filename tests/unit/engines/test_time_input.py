"""Tests for raw result parsing and formatting."""

import pytest

from app.catalog.disciplines import get_discipline
from app.engines.time_input import (
    format_result_value,
    format_seconds,
    format_time_display,
    is_time_unit,
    parse_result_value,
    parse_time_to_seconds,
    should_use_time_input,
)


class TestShouldUseTimeInput:
    @pytest.mark.parametrize(
        "unit, direction, expected",
        [
            ("sec", "lower_better", True),
            ("sec", "higher_better", False),
            ("kg", "lower_better", False),
            ("reps", "higher_better", False),
        ],
    )
    def test_only_timed_lower_better(self, unit, direction, expected):
        assert should_use_time_input(unit, direction) is expected


class TestParseTime:
    @pytest.mark.parametrize(
        "raw, expected",
        [("3:45", 225), ("0:59", 59), ("12:00", 720), (" 4:05 ", 245), ("90", 90), ("12.6", 13), ("0", 0)],
    )
    def test_valid(self, raw, expected):
        assert parse_time_to_seconds(raw) == expected

    @pytest.mark.parametrize("raw", ["1:60", "abc", "1:2:3", "-1:00", "1:-5", "", "-3", "inf", "a:10"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_time_to_seconds(raw)


class TestFormat:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(225, "03:45"), (0, "00:00"), (59.6, "01:00"), (3600, "60:00"), (-5, "00:00")],
    )
    def test_format_seconds(self, seconds, expected):
        assert format_seconds(seconds) == expected

    def test_short_durations_in_seconds(self):
        assert format_time_display(45) == "45 сек"
        assert format_time_display(125) == "02:05"


class TestResultValue:
    def test_time_discipline(self):
        assert parse_result_value("3:30", get_discipline("run_1km")) == 210.0

    def test_decimal_comma(self):
        assert parse_result_value("102,5", get_discipline("bench_press")) == 102.5

    def test_timed_higher_better_is_plain_seconds(self):
        assert parse_result_value("90", get_discipline("plank")) == 90.0

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf", ""])
    def test_invalid_number(self, raw):
        with pytest.raises(ValueError):
            parse_result_value(raw, get_discipline("bench_press"))

    def test_format(self):
        assert format_result_value(210, get_discipline("run_1km")) == "03:30"
        assert format_result_value(100.0, get_discipline("bench_press")) == "100"
        assert format_result_value(102.5, get_discipline("bench_press")) == "102.5"

    def test_format_timed_hold(self):
        assert format_result_value(45, get_discipline("plank")) == "45 сек"
        assert format_result_value(90, get_discipline("plank")) == "01:30"

    @pytest.mark.parametrize("unit, expected", [("sec", True), ("min", True), ("kg", False), ("reps", False)])
    def test_is_time_unit(self, unit, expected):
        assert is_time_unit(unit) is expected

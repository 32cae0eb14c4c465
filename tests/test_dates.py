from datetime import date, datetime

import pytest

from anylist_mcp.utils.dates import add_days, is_within_range, parse_date, to_date_text, today


class TestParseDate:
    @pytest.mark.parametrize("text", ["2024-03-15", "2024-02-29", "1999-12-31", "2025-01-01"])
    def test_round_trips_valid_dates(self, text):
        parsed = parse_date(text)

        assert isinstance(parsed, date)
        assert to_date_text(parsed) == text

    @pytest.mark.parametrize(
        "value",
        ["2024-02-30", "2023-02-29", "2024-13-01", "2024-00-10", "2024-3-15", "24-03-15", "2024/03/15",
         "2024-03-15T10:00", "2024-03-15\n", " 2024-03-15", "", None, 20240315, ["2024-03-15"]],
    )
    def test_rejects_malformed_or_impossible_dates(self, value):
        assert parse_date(value) is None

    def test_returns_plain_date(self):
        assert parse_date("2024-03-15") == date(2024, 3, 15)


class TestToDateText:
    def test_pads_month_and_day(self):
        assert to_date_text(date(2024, 1, 5)) == "2024-01-05"

    def test_uses_date_part_of_datetime(self):
        assert to_date_text(datetime(2024, 1, 5, 23, 59)) == "2024-01-05"

    @pytest.mark.parametrize("value", [None, "2024-01-05", 0, object()])
    def test_returns_empty_string_for_non_dates(self, value):
        assert to_date_text(value) == ""


class TestIsWithinRange:
    def test_inclusive_on_both_ends(self):
        start, end = date(2024, 3, 1), date(2024, 3, 31)

        assert is_within_range(start, start, end)
        assert is_within_range(end, start, end)
        assert is_within_range(date(2024, 3, 15), start, end)

    def test_outside_range(self):
        start, end = date(2024, 3, 1), date(2024, 3, 31)

        assert not is_within_range(date(2024, 2, 29), start, end)
        assert not is_within_range(date(2024, 4, 1), start, end)

    def test_single_day_range(self):
        day = date(2024, 3, 1)
        assert is_within_range(day, day, day)

    @pytest.mark.parametrize(
        "args",
        [(None, date(2024, 1, 1), date(2024, 1, 2)), (date(2024, 1, 1), None, date(2024, 1, 2)),
         (date(2024, 1, 1), date(2024, 1, 1), None)],
    )
    def test_missing_argument_is_false(self, args):
        assert is_within_range(*args) is False


class TestDayArithmetic:
    def test_today_is_a_date(self):
        value = today()

        assert type(value) is date
        assert value == date.today()

    def test_add_days_rolls_over_month(self):
        assert add_days(date(2024, 3, 30), 5) == date(2024, 4, 4)

    def test_add_days_rolls_over_year_backwards(self):
        assert add_days(date(2024, 1, 2), -3) == date(2023, 12, 30)

    def test_add_days_leaves_input_untouched(self):
        original = date(2024, 3, 30)
        add_days(original, 5)

        assert original == date(2024, 3, 30)

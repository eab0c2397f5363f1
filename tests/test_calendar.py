"""Tests for paycycle.core.calendar: month arithmetic and date parsing."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from paycycle.core.calendar import (
    add_calendar_months,
    add_days,
    days_in_month,
    end_of_month,
    is_month_end,
    parse_iso_date,
    period_label,
)
from paycycle.core.result import Err, Ok


class TestAddCalendarMonths:
    def test_keeps_day_when_valid(self) -> None:
        assert add_calendar_months(date(2024, 1, 15), 1) == date(2024, 2, 15)

    def test_clamps_to_leap_february(self) -> None:
        assert add_calendar_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_clamps_to_common_february(self) -> None:
        assert add_calendar_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_added_to_anchor_not_chained(self) -> None:
        assert add_calendar_months(date(2024, 1, 31), 2) == date(2024, 3, 31)

    def test_crosses_year(self) -> None:
        assert add_calendar_months(date(2024, 11, 30), 3) == date(2025, 2, 28)

    def test_negative_months(self) -> None:
        assert add_calendar_months(date(2024, 3, 31), -1) == date(2024, 2, 29)

    def test_without_roll_keeps_day_30(self) -> None:
        assert add_calendar_months(date(2024, 4, 30), 1) == date(2024, 5, 30)

    def test_roll_end_of_month(self) -> None:
        assert add_calendar_months(date(2024, 4, 30), 1, roll_end_of_month=True) == date(2024, 5, 31)

    @given(st.dates(min_value=date(1900, 1, 1), max_value=date(2200, 1, 1)),
           st.integers(min_value=0, max_value=120))
    def test_never_overflows_into_next_month(self, d: date, months: int) -> None:
        result = add_calendar_months(d, months)
        total = d.year * 12 + d.month - 1 + months
        assert (result.year, result.month) == (total // 12, total % 12 + 1)
        assert result.day == min(d.day, days_in_month(result.year, result.month))


class TestMonthEnd:
    @pytest.mark.parametrize(("d", "expected"), [
        (date(2024, 2, 29), True),
        (date(2023, 2, 28), True),
        (date(2024, 2, 28), False),
        (date(2024, 4, 30), True),
        (date(2024, 3, 30), False),
    ])
    def test_is_month_end(self, d: date, expected: bool) -> None:
        assert is_month_end(d) is expected

    def test_end_of_month(self) -> None:
        assert end_of_month(date(2024, 2, 10)) == date(2024, 2, 29)
        assert end_of_month(date(2024, 12, 31)) == date(2024, 12, 31)


class TestAddDays:
    def test_forward_and_back(self) -> None:
        assert add_days(date(2024, 3, 30), 14) == date(2024, 4, 13)
        assert add_days(date(2024, 3, 30), -7) == date(2024, 3, 23)


class TestPeriodLabel:
    def test_december(self) -> None:
        assert period_label(date(2025, 12, 29)) == "Dec 2025"

    def test_january(self) -> None:
        assert period_label(date(2024, 1, 1)) == "Jan 2024"

    def test_four_digit_year(self) -> None:
        assert period_label(date(5, 6, 1)) == "Jun 0005"


class TestParseIsoDate:
    def test_iso_string(self) -> None:
        assert parse_iso_date("2024-01-31") == Ok(date(2024, 1, 31))

    def test_strips_whitespace(self) -> None:
        assert parse_iso_date(" 2024-01-31 ") == Ok(date(2024, 1, 31))

    def test_date_passthrough(self) -> None:
        assert parse_iso_date(date(2024, 1, 31)) == Ok(date(2024, 1, 31))

    def test_datetime_truncated(self) -> None:
        assert parse_iso_date(datetime(2024, 1, 31, 15, 30)) == Ok(date(2024, 1, 31))

    @pytest.mark.parametrize("raw", ["", "  ", "2024-02-30", "2024-13-01", "tomorrow", None, 20240131])
    def test_rejects(self, raw: object) -> None:
        assert isinstance(parse_iso_date(raw), Err)

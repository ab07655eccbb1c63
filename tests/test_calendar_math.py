from datetime import date, datetime, timedelta, timezone

import pytest

from lifegrid.calendar_math import (
    CURRENT,
    FUTURE,
    PASSED,
    classify_day,
    day_of_year,
    days_in_month,
    days_in_year,
    days_remaining_in_year,
    first_weekday_of_month,
    is_leap_year,
    month_progress_percent,
    take_snapshot,
    year_progress_percent,
)


@pytest.mark.parametrize(
    "year, leap",
    [(2023, False), (2024, True), (1600, True), (1900, False), (2000, True), (2100, False)],
)
def test_leap_years(year, leap):
    assert is_leap_year(year) is leap
    assert days_in_year(year) == (366 if leap else 365)


def test_day_of_year():
    assert day_of_year(date(2024, 1, 1)) == 1
    assert day_of_year(date(2024, 7, 4)) == 186
    assert day_of_year(date(2024, 12, 31)) == 366
    assert day_of_year(date(2023, 12, 31)) == 365


def test_first_day_progress():
    assert year_progress_percent(date(2024, 1, 1)) == pytest.approx(100 / 366)
    assert year_progress_percent(date(2025, 1, 1)) == pytest.approx(100 / 365)


def test_end_of_year_progress():
    last = date(2025, 12, 31)
    assert days_remaining_in_year(last) == 0
    assert year_progress_percent(last) == pytest.approx(100.0)


def test_month_helpers():
    assert days_in_month(date(2024, 2, 10)) == 29
    assert days_in_month(date(2025, 2, 10)) == 28
    assert month_progress_percent(date(2026, 4, 15)) == pytest.approx(50.0)
    # April 1 2026 is a Wednesday; Sunday is 0
    assert first_weekday_of_month(date(2026, 4, 20)) == 3
    # March 1 2026 is a Sunday
    assert first_weekday_of_month(date(2026, 3, 9)) == 0


def test_classification_is_exhaustive():
    states = [classify_day(n, 10) for n in range(1, 31)]
    assert states.count(CURRENT) == 1
    assert states[:9] == [PASSED] * 9
    assert set(states[10:]) == {FUTURE}


def test_snapshot_uses_ist_by_default():
    # 20:00 UTC on Dec 31 is already Jan 1 in UTC+5:30
    snap = take_snapshot(datetime(2026, 12, 31, 20, 0, tzinfo=timezone.utc))
    assert (snap.year, snap.month, snap.day_of_month) == (2027, 1, 1)
    assert snap.day_of_year == 1
    assert snap.days_remaining_in_year == 364


def test_snapshot_naive_is_utc_and_offset_override():
    naive = datetime(2026, 12, 31, 20, 0)
    assert take_snapshot(naive).year == 2027
    snap = take_snapshot(naive, offset=timezone(timedelta(hours=-5)))
    assert (snap.year, snap.day_of_year) == (2026, 365)
    assert snap.year_progress_percent == pytest.approx(100.0)


def test_snapshot_fields(october_2026):
    assert october_2026.day_of_year == 291
    assert october_2026.total_days_in_year == 365
    assert october_2026.total_days_in_month == 31
    # October 1 2026 is a Thursday
    assert october_2026.first_weekday_of_month == 4
    assert october_2026.month_abbr == "Oct"
    assert october_2026.month_name == "October"

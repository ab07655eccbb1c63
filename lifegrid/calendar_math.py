from __future__ import annotations

import calendar as _calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

# India Standard Time (IST, UTC+5:30)
IST = timezone(timedelta(hours=5, minutes=30))

PASSED = "passed"
CURRENT = "current"
FUTURE = "future"


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def day_of_year(d: date) -> int:
    """1-indexed ordinal day: Jan 1 -> 1, Dec 31 -> 365 or 366."""
    return (d - date(d.year, 1, 1)).days + 1


def days_in_month(d: date) -> int:
    return _calendar.monthrange(d.year, d.month)[1]


def first_weekday_of_month(d: date) -> int:
    """Weekday of the 1st of d's month, Sunday=0 .. Saturday=6."""
    return (date(d.year, d.month, 1).weekday() + 1) % 7


def days_remaining_in_year(d: date) -> int:
    return days_in_year(d.year) - day_of_year(d)


def year_progress_percent(d: date) -> float:
    return day_of_year(d) / days_in_year(d.year) * 100


def days_remaining_in_month(d: date) -> int:
    return days_in_month(d) - d.day


def month_progress_percent(d: date) -> float:
    return d.day / days_in_month(d) * 100


def classify_day(day_number: int, current: int) -> str:
    """Return PASSED, CURRENT or FUTURE for a day relative to today."""
    if day_number < current:
        return PASSED
    if day_number == current:
        return CURRENT
    return FUTURE


@dataclass(frozen=True)
class DateSnapshot:
    year: int
    month: int
    day_of_month: int
    day_of_year: int
    total_days_in_year: int
    total_days_in_month: int
    first_weekday_of_month: int

    @property
    def days_remaining_in_year(self) -> int:
        return self.total_days_in_year - self.day_of_year

    @property
    def days_remaining_in_month(self) -> int:
        return self.total_days_in_month - self.day_of_month

    @property
    def year_progress_percent(self) -> float:
        return self.day_of_year / self.total_days_in_year * 100

    @property
    def month_progress_percent(self) -> float:
        return self.day_of_month / self.total_days_in_month * 100

    @property
    def month_name(self) -> str:
        return _calendar.month_name[self.month]

    @property
    def month_abbr(self) -> str:
        return _calendar.month_abbr[self.month]


def snapshot_for(d: date) -> DateSnapshot:
    return DateSnapshot(
        year=d.year,
        month=d.month,
        day_of_month=d.day,
        day_of_year=day_of_year(d),
        total_days_in_year=days_in_year(d.year),
        total_days_in_month=days_in_month(d),
        first_weekday_of_month=first_weekday_of_month(d),
    )


def take_snapshot(now: datetime | None = None, offset: timezone | None = None) -> DateSnapshot:
    """Build the snapshot for "today" in the fixed offset (IST unless overridden).

    Naive datetimes are treated as UTC.
    """
    tz = offset or IST
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return snapshot_for(now.astimezone(tz).date())

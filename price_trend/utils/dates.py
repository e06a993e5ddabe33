"""
Calendar date to epoch-seconds conversion.

Dates arrive as 8-digit ``YYYYMMDD`` strings and are converted to whole
seconds since 1970-01-01T00:00:00Z by counting days. No timezones, no
leap seconds: every day is exactly 86400 seconds.
"""
import math
from dataclasses import dataclass

from ..exceptions import ValidationError

SECONDS_PER_DAY = 86400
EPOCH_YEAR = 1970
DAYS_PER_400_YEARS = 146097
MIN_YEAR = 0
MAX_YEAR = 9999

_THIRTY_ONE_DAY_MONTHS = {1, 3, 5, 7, 8, 10, 12}
_THIRTY_DAY_MONTHS = {4, 6, 9, 11}


@dataclass(frozen=True)
class CalendarDate:
    """A validated (year, month, day) triple."""
    year: int
    month: int
    day: int


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """
    Number of days in a month of a given year.

    Raises:
        ValidationError: If month is outside 1-12
    """
    if month in _THIRTY_ONE_DAY_MONTHS:
        return 31
    if month in _THIRTY_DAY_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    raise ValidationError(f"Invalid month: {month}")


def _days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def parse_date_string(date_str: str) -> CalendarDate:
    """
    Parse a ``YYYYMMDD`` string into a CalendarDate.

    Args:
        date_str: Exactly 8 ASCII digits

    Returns:
        CalendarDate with month and day checked against the calendar

    Raises:
        ValidationError: On wrong type, wrong length, non-digit content,
            or an out-of-range month/day
    """
    if not isinstance(date_str, str):
        raise ValidationError(
            f"Date must be a YYYYMMDD string, got {type(date_str).__name__}"
        )
    if len(date_str) != 8 or not (date_str.isascii() and date_str.isdigit()):
        raise ValidationError(f"Date must be 8 digits (YYYYMMDD): {date_str!r}")

    year = int(date_str[0:4])
    month = int(date_str[4:6])
    day = int(date_str[6:8])

    if not 1 <= month <= 12:
        raise ValidationError(f"Month out of range in {date_str!r}: {month}")

    max_day = days_in_month(month, year)
    if not 1 <= day <= max_day:
        raise ValidationError(
            f"Day out of range in {date_str!r}: {day} (month has {max_day} days)"
        )

    return CalendarDate(year=year, month=month, day=day)


def calendar_to_timestamp(year: int, month: int, day: int) -> int:
    """
    Seconds since the epoch for midnight UTC of the given date.

    Years before 1970 count backwards, so the result is negative.
    Month and day are assumed valid; use parse_date_string for raw input.
    """
    total_days = 0

    if year >= EPOCH_YEAR:
        for y in range(EPOCH_YEAR, year):
            total_days += _days_in_year(y)
    else:
        for y in range(year, EPOCH_YEAR):
            total_days -= _days_in_year(y)

    for m in range(1, month):
        total_days += days_in_month(m, year)

    total_days += day - 1

    return total_days * SECONDS_PER_DAY


def date_to_timestamp(date_str: str) -> int:
    """
    Convert a ``YYYYMMDD`` string to elapsed seconds since 1970-01-01.

    Examples:
        >>> date_to_timestamp('19700101')
        0
        >>> date_to_timestamp('19700102')
        86400

    Raises:
        ValidationError: If the string is malformed or out of range
    """
    date = parse_date_string(date_str)
    return calendar_to_timestamp(date.year, date.month, date.day)


def timestamp_to_date(seconds: float) -> str:
    """
    Format elapsed seconds as the ``YYYYMMDD`` date they fall on (UTC).

    Inverse of the day count in calendar_to_timestamp. Whole 400-year
    Gregorian cycles are skipped first, so any finite input resolves in
    bounded time.

    Raises:
        ValidationError: If seconds is not finite or the date falls
            outside years 0000-9999
    """
    if not math.isfinite(seconds):
        raise ValidationError(f"Cannot format non-finite time: {seconds}")

    days = int(seconds // SECONDS_PER_DAY)
    cycles, days = divmod(days, DAYS_PER_400_YEARS)
    year = EPOCH_YEAR + 400 * cycles

    while days >= _days_in_year(year):
        days -= _days_in_year(year)
        year += 1

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(
            f"Time {seconds} falls in year {year}, outside YYYYMMDD range"
        )

    month = 1
    while days >= days_in_month(month, year):
        days -= days_in_month(month, year)
        month += 1

    return f"{year:04d}{month:02d}{days + 1:02d}"

"""Utility modules."""
from .dates import (
    CalendarDate,
    is_leap_year,
    days_in_month,
    parse_date_string,
    calendar_to_timestamp,
    date_to_timestamp,
    timestamp_to_date,
)

__all__ = [
    'CalendarDate',
    'is_leap_year',
    'days_in_month',
    'parse_date_string',
    'calendar_to_timestamp',
    'date_to_timestamp',
    'timestamp_to_date',
]

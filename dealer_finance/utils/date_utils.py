"""Date manipulation utilities"""

import calendar
from datetime import date, timedelta


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative when end precedes start)"""
    return (end - start).days


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """(year, month) moved by a number of calendar months"""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def add_months(from_date: date, months: int, day: int | None = None) -> date:
    """
    Move a date by whole calendar months.

    The day of month defaults to from_date's and is clamped to the last day
    of the target month (Jan 31 + 1 month = Feb 28/29).
    """
    year, month = shift_month(from_date.year, from_date.month, months)
    preferred = from_date.day if day is None else day
    return date(year, month, min(preferred, last_day_of_month(year, month)))


def last_business_day(from_date: date) -> date:
    """Move weekend dates back to the preceding Friday (no holiday calendar)"""
    weekday = from_date.weekday()
    if weekday == 5:  # Saturday
        return from_date - timedelta(days=1)
    if weekday == 6:  # Sunday
        return from_date - timedelta(days=2)
    return from_date

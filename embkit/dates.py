"""Helpers for validating and formatting times and dates."""

from __future__ import annotations

_WEEKDAY_NAMES = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def seconds_since_twelve(hour: int, minutes: int, seconds: int) -> int:
    """Seconds elapsed since the clock last struck twelve."""
    return hour * 60 * 60 + minutes * 60 + seconds


def validate_time(hour: int, minutes: int, seconds: int) -> bool:
    """True if hour is at most 24 and minutes and seconds at most 60."""
    return 0 <= hour <= 24 and 0 <= minutes <= 60 and 0 <= seconds <= 60


def is_leap_year(year: int) -> bool:
    """True when the year is divisible by four."""
    return year % 4 == 0


def validate_date(day: int, month: int, year: int) -> bool:
    """True for a day/month/year between 1900 and 2100, with February checked for leap years."""
    if not 1900 <= year <= 2100:
        return False
    if not 1 <= month <= 12:
        return False
    if month == 2:
        return 1 <= day <= (29 if is_leap_year(year) else 28)
    return 1 <= day <= 31


def week_day(day: int, month: int, year: int) -> int:
    """Day of the week of a valid date, from Monday (1) to Sunday (7)."""
    if month in (1, 2):
        month += 12
        year -= 1
    century = year // 100
    year_part = year % 100
    h = (day + (13 * (month + 1)) // 5 + year_part + year_part // 4
         + century // 4 - 2 * century) % 7
    return (h + 5) % 7 + 1


def _two_digits(value: int, name: str) -> str:
    if not 0 <= value <= 99:
        raise ValueError(f"{name} must fit in two digits: {value}")
    return f"{value:02d}"


def time_string(hours: int, minutes: int, seconds: int) -> str:
    """Format a time as HH:MM:SS."""
    return ":".join(
        (
            _two_digits(hours, "hours"),
            _two_digits(minutes, "minutes"),
            _two_digits(seconds, "seconds"),
        )
    )


def alarm_string(hours: int, minutes: int) -> str:
    """Format an alarm as ALARM=HH:MM."""
    return f"ALARM={_two_digits(hours, 'hours')}:{_two_digits(minutes, 'minutes')}"


def date_string(month: int, day: int, year: int, weekday: int) -> str:
    """Format a date such as 'Aug 31, 2000 We' followed by a newline.

    month runs from 1 to 12 and weekday from 1 (Monday) to 7 (Sunday).
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    if not 1 <= weekday <= 7:
        raise ValueError(f"weekday out of range: {weekday}")
    return f"{_MONTH_NAMES[month - 1]} {day:02d}, {year} {_WEEKDAY_NAMES[weekday - 1]}\n"
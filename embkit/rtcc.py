"""A software real-time clock and calendar with a single alarm."""

from __future__ import annotations

MIN_YEAR = 1900
MAX_YEAR = 2100

_CLK_EN = 0x01
_AL_SET = 0x02
_AL_ACTIVE = 0x04


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _month_lengths(year: int) -> list[int]:
    days = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    if _is_leap(year):
        days[1] = 29
    return days


def zeller_weekday(day: int, month: int, year: int) -> int:
    """Day of the week by Zeller's congruence: 0 = Saturday, 1 = Sunday, ..., 6 = Friday."""
    if month < 3:
        month += 12
        year -= 1
    k = year % 100
    j = year // 100
    return (day + (13 * (month + 1)) // 5 + k + k // 4 + j // 4 + 5 * j) % 7


class Rtcc:
    """Clock and calendar advanced one second per call to tick()."""

    def __init__(self) -> None:
        self._second = 0
        self._minute = 0
        self._hour = 0
        self._day = 1
        self._month = 1
        self._year = MIN_YEAR
        self._month_days = _month_lengths(MIN_YEAR)
        self._alarm_hour = 0
        self._alarm_minute = 0
        self._clock_enabled = True
        self._alarm_set = False
        self._alarm_active = False

    @property
    def clock_enabled(self) -> bool:
        """True while the clock is enabled."""
        return self._clock_enabled

    @property
    def alarm_set(self) -> bool:
        """True once an alarm value has been programmed."""
        return self._alarm_set

    @property
    def control(self) -> int:
        """Control flags as a register: bit 0 clock enable, bit 1 alarm set, bit 2 alarm active."""
        value = 0
        if self._clock_enabled:
            value |= _CLK_EN
        if self._alarm_set:
            value |= _AL_SET
        if self._alarm_active:
            value |= _AL_ACTIVE
        return value

    def set_time(self, hour: int, minutes: int, seconds: int) -> None:
        """Set the time of day; raise ValueError if any field is out of range."""
        if not 0 <= hour <= 23:
            raise ValueError(f"hour out of range: {hour}")
        if not 0 <= minutes <= 59:
            raise ValueError(f"minutes out of range: {minutes}")
        if not 0 <= seconds <= 59:
            raise ValueError(f"seconds out of range: {seconds}")
        self._hour = hour
        self._minute = minutes
        self._second = seconds

    def set_date(self, day: int, month: int, year: int) -> None:
        """Set the calendar date; raise ValueError if it is not a valid date."""
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise ValueError(f"year out of range: {year}")
        if not 1 <= month <= 12:
            raise ValueError(f"month out of range: {month}")
        month_days = _month_lengths(year)
        if not 1 <= day <= month_days[month - 1]:
            raise ValueError(f"day out of range for month {month}: {day}")
        self._month_days = month_days
        self._year = year
        self._month = month
        self._day = day

    def set_alarm(self, hour: int, minutes: int) -> None:
        """Program the alarm time; raise ValueError if it is out of range."""
        if not 0 <= hour <= 23:
            raise ValueError(f"alarm hour out of range: {hour}")
        if not 0 <= minutes <= 59:
            raise ValueError(f"alarm minutes out of range: {minutes}")
        self._alarm_hour = hour
        self._alarm_minute = minutes
        self._alarm_set = True

    def current_time(self) -> tuple[int, int, int]:
        """Return (hour, minutes, seconds)."""
        return self._hour, self._minute, self._second

    def current_date(self) -> tuple[int, int, int, int]:
        """Return (day, month, year, weekday) with weekday 0 = Saturday."""
        weekday = zeller_weekday(self._day, self._month, self._year)
        return self._day, self._month, self._year, weekday

    def alarm(self) -> tuple[int, int]:
        """Return the programmed alarm as (hour, minutes)."""
        return self._alarm_hour, self._alarm_minute

    def clear_alarm(self) -> None:
        """Clear the alarm if it matches the current hour and minute."""
        if self._alarm_hour == self._hour and self._alarm_minute == self._minute:
            self._alarm_active = False
            self.set_alarm(0, 0)

    def alarm_active(self) -> bool:
        """True while the alarm is flagged as active."""
        return self._alarm_active

    def tick(self) -> None:
        """Advance the clock by one second, rolling over into the calendar."""
        self._second += 1
        if self._second < 60:
            return
        self._second = 0
        self._minute += 1
        if self._minute < 60:
            return
        self._minute = 0
        self._hour += 1
        if self._hour < 24:
            return
        self._hour = 0
        self._day += 1
        if self._day <= self._month_days[self._month - 1]:
            return
        self._day = 1
        self._month += 1
        if self._month > 12:
            self._month = 1
            self._year += 1
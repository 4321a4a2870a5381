"""Day counters: the arithmetic behind each calendar convention."""

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Iterator

FRIDAY = 4
SATURDAY = 5
SUNDAY = 6


class DayCounter(ABC):
    """Abstract base class for day counters.

    A day counter defines the properties of a calendar convention: which
    dates are active, the standard year duration, the number of active
    days between two dates and the shift of a date by active days.
    Counters hold no state and can be shared freely.
    """

    @abstractmethod
    def is_active(self, d: date) -> bool:
        """Return True if the date is counted by the convention."""
        pass

    @abstractmethod
    def days_in_year(self) -> int:
        """Standard year duration in active days."""
        pass

    @abstractmethod
    def add(self, origin: date, days: int) -> date:
        """Shift origin by a signed number of active days."""
        pass

    @abstractmethod
    def days_between(self, from_date: date, to_date: date) -> int:
        """Count active dates in (from_date, to_date], signed."""
        pass

    def active_range(self, start: date, end: date) -> Iterator[date]:
        """Generate active dates in range [start, end]."""
        current = start
        while current <= end:
            if self.is_active(current):
                yield current
            current += timedelta(days=1)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PhysicalDayCounter(DayCounter):
    """Counter in which every day, weekends included, is active."""

    def is_active(self, d: date) -> bool:
        return True

    def days_in_year(self) -> int:
        return 365

    def add(self, origin: date, days: int) -> date:
        return origin + timedelta(days=days)

    def days_between(self, from_date: date, to_date: date) -> int:
        if from_date > to_date:
            return -self.days_between(to_date, from_date)
        return (to_date - from_date).days


class BusinessDayCounter(DayCounter):
    """Counter whose active days are working days.

    Saturdays and Sundays are inactive; no holidays are taken into account.
    """

    def is_active(self, d: date) -> bool:
        return not self.is_weekend(d)

    def days_in_year(self) -> int:
        return 252

    def is_weekend(self, d: date) -> bool:
        return d.weekday() >= SATURDAY

    def next_business_day(self, origin: date) -> date:
        return self.closest_business_day(origin, forwards=True)

    def previous_business_day(self, origin: date) -> date:
        return self.closest_business_day(origin, forwards=False)

    def closest_business_day(self, origin: date, forwards: bool) -> date:
        """Find the business day closest to origin in the given direction.

        Returns origin itself when it is already a business day.
        """
        step = timedelta(days=1 if forwards else -1)
        current = origin
        while self.is_weekend(current):
            current += step
        return current

    def add(self, origin: date, days: int) -> date:
        """Shift origin by a signed number of business days.

        A weekend origin is first moved back to the preceding Friday, so a
        zero shift returns the latest business day at or before origin.
        """
        current = self.previous_business_day(origin)
        if days == 0:
            return current

        # Truncate toward zero in both directions
        weeks, days_left = divmod(abs(days), 5)
        if days < 0:
            weeks, days_left = -weeks, -days_left

        days_left = _skip_weekend(current, days_left, days)
        return current + timedelta(days=weeks * 7 + days_left)

    def days_between(self, from_date: date, to_date: date) -> int:
        """Count business days between from_date (excluded) and to_date (included).

        There are zero business days from a Friday to a weekend day, but one
        from a weekend day to the following Monday.
        """
        if from_date > to_date:
            return -self.days_between(to_date, from_date)

        start, end = from_date, to_date

        # Move a Friday or Saturday start to the following Sunday
        if start.weekday() == FRIDAY:
            start += timedelta(days=2)
        elif start.weekday() == SATURDAY:
            start += timedelta(days=1)

        # Move a weekend end back to the preceding Friday
        if end.weekday() == SATURDAY:
            end -= timedelta(days=1)
        elif end.weekday() == SUNDAY:
            end -= timedelta(days=2)

        raw_days = (end - start).days
        if raw_days <= 0:
            return 0

        # A start later in the week than the end straddles one more weekend
        if _sunday_first(start) > _sunday_first(end):
            raw_days -= 2

        return raw_days // 7 * 5 + raw_days % 7


def _sunday_first(d: date) -> int:
    """Weekday number with Sunday=0 through Saturday=6."""
    return d.isoweekday() % 7


def _skip_weekend(current: date, days_left: int, days: int) -> int:
    """Widen days_left by two when it does not fit in current's week."""
    if days > 0 and FRIDAY - current.weekday() < days_left:
        return days_left + 2
    if days < 0 and current.weekday() < -days_left:
        return days_left - 2
    return days_left

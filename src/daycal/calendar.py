"""Calendar facade over a day counter."""

from dataclasses import dataclass
from datetime import date
from typing import Iterator

from daycal.convention import Convention
from daycal.counters import DayCounter


@dataclass(frozen=True)
class Calendar:
    """Manipulate dates with respect to a calendar convention.

    Obtain instances through ``daycal.new_calendar``. All operations are
    forwarded to the wrapped day counter; ``latest_before``, ``next`` and
    ``previous`` are derived from ``add``.
    """

    day_counter: DayCounter
    convention: Convention

    def is_active(self, d: date) -> bool:
        return self.day_counter.is_active(d)

    def days_in_year(self) -> int:
        return self.day_counter.days_in_year()

    def add(self, origin: date, days: int) -> date:
        """Shift origin by a signed number of active days."""
        return self.day_counter.add(origin, days)

    def days_between(self, from_date: date, to_date: date) -> int:
        """Count active dates between from_date (excluded) and to_date (included)."""
        return self.day_counter.days_between(from_date, to_date)

    def active_range(self, start: date, end: date) -> Iterator[date]:
        return self.day_counter.active_range(start, end)

    def latest_before(self, d: date) -> date:
        """Return the latest active date before or equal to d.

        Unlike d, the result belongs to the calendar by construction.
        """
        return self.add(d, 0)

    def next(self, d: date) -> date:
        return self.add(d, 1)

    def previous(self, d: date) -> date:
        return self.add(d, -1)

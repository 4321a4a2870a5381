"""Construction of day counters and calendars from a convention."""

from typing import Any

from daycal.calendar import Calendar
from daycal.config import get_default_convention
from daycal.convention import Convention
from daycal.counters import BusinessDayCounter, DayCounter, PhysicalDayCounter
from daycal.logging import get_logger

_log = get_logger(__name__)

# Counters are stateless, one shared instance per convention
_COUNTERS: dict[Convention, DayCounter] = {
    Convention.BUSINESS_DAYS: BusinessDayCounter(),
    Convention.CALENDAR_DAYS: PhysicalDayCounter(),
}


def _resolve(convention: Any) -> Convention:
    """None selects the configured default; unknown values mean business days."""
    if convention is None:
        return get_default_convention()
    return Convention.resolve(convention)


def new_day_counter(convention: Any = None) -> DayCounter:
    """Return the day counter for a convention.

    Args:
        convention: Convention member or name. None selects the configured
            default (see ``configure_calendar``). Unrecognized conventions
            fall back to business days.
    """
    return _COUNTERS[_resolve(convention)]


def new_calendar(convention: Any = None) -> Calendar:
    """Return a calendar for a convention.

    Args:
        convention: Convention member or name. None selects the configured
            default (see ``configure_calendar``). Any other unrecognized
            value is treated as ``Convention.BUSINESS_DAYS``.
    """
    resolved = _resolve(convention)
    _log.debug("calendar_created", convention=resolved.value)
    return Calendar(day_counter=_COUNTERS[resolved], convention=resolved)

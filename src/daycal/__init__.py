"""daycal - Active-day date arithmetic for business and calendar day conventions."""

from daycal.calendar import Calendar
from daycal.config import (
    CalendarConfig,
    configure_calendar,
    get_calendar_config,
    get_default_convention,
    reset_calendar_config,
)
from daycal.convention import Convention
from daycal.counters import BusinessDayCounter, DayCounter, PhysicalDayCounter
from daycal.factory import new_calendar, new_day_counter
from daycal.frames import active_mask, days_between_dates, shift_dates
from daycal.logging import configure_logging, get_logger
from daycal.validation import ValidationError, validate_convention

__all__ = [
    # Primary API - callers obtain a Calendar and use its methods
    "Calendar",
    "Convention",
    "new_calendar",
    # Day counters
    "DayCounter",
    "BusinessDayCounter",
    "PhysicalDayCounter",
    "new_day_counter",
    # Config
    "CalendarConfig",
    "configure_calendar",
    "get_calendar_config",
    "get_default_convention",
    "reset_calendar_config",
    # Logging
    "configure_logging",
    "get_logger",
    # Validation
    "ValidationError",
    "validate_convention",
    # DataFrame helpers
    "active_mask",
    "days_between_dates",
    "shift_dates",
]
__version__ = "0.1.0"

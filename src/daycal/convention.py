"""Day-counting conventions."""

from enum import Enum
from typing import Any

from daycal.logging import get_logger

_log = get_logger(__name__)


class Convention(str, Enum):
    """Named policy selecting which days are active.

    BUSINESS_DAYS uses a no-holiday calendar: only working days are active
    and weekends are skipped. CALENDAR_DAYS uses the nominal ISO calendar
    where every day, weekends included, is active.
    """

    BUSINESS_DAYS = "BusinessDays"
    CALENDAR_DAYS = "CalendarDays"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def resolve(cls, value: Any) -> "Convention":
        """Map a convention name to a member, defaulting to BUSINESS_DAYS.

        Unrecognized values are not an error. Callers that need to reject
        typos should use ``daycal.validation.validate_convention`` first.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            _log.debug(
                "convention_fallback",
                requested=str(value),
                resolved=cls.BUSINESS_DAYS.value,
            )
            return cls.BUSINESS_DAYS

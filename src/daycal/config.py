"""Module-level configuration for daycal defaults."""

import threading
from dataclasses import dataclass

from daycal.convention import Convention
from daycal.validation import validate_convention


@dataclass
class CalendarConfig:
    """Configuration for daycal defaults."""

    default_convention: Convention = Convention.BUSINESS_DAYS


# Module-level singleton
_calendar_config: CalendarConfig | None = None
_config_lock = threading.Lock()


def get_calendar_config() -> CalendarConfig:
    """Get the global daycal configuration singleton."""
    global _calendar_config
    if _calendar_config is None:
        with _config_lock:
            if _calendar_config is None:
                _calendar_config = CalendarConfig()
    return _calendar_config


def configure_calendar(
    default_convention: Convention | str | None = None,
) -> None:
    """Configure default daycal settings.

    Args:
        default_convention: Convention used by ``new_calendar()`` when no
            convention is given. Unlike calendar construction, an unknown
            name is rejected here with a ValidationError.

    Example:
        from daycal import configure_calendar, new_calendar

        configure_calendar(default_convention="CalendarDays")

        cal = new_calendar()  # Counts every day
    """
    config = get_calendar_config()
    with _config_lock:
        if default_convention is not None:
            config.default_convention = validate_convention(default_convention)


def get_default_convention() -> Convention:
    """Get the default convention."""
    return get_calendar_config().default_convention


def reset_calendar_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calendar_config
    with _config_lock:
        _calendar_config = CalendarConfig()

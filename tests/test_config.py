"""Tests for module-level configuration."""

import pytest

from daycal import (
    BusinessDayCounter,
    Convention,
    PhysicalDayCounter,
    ValidationError,
    configure_calendar,
    get_calendar_config,
    get_default_convention,
    new_calendar,
    new_day_counter,
    reset_calendar_config,
)


class TestCalendarConfig:
    """Test configure_calendar and the default convention."""

    def test_default_convention(self):
        assert get_default_convention() is Convention.BUSINESS_DAYS

    def test_config_is_singleton(self):
        assert get_calendar_config() is get_calendar_config()

    def test_configure_default_convention(self):
        configure_calendar(default_convention="CalendarDays")

        assert get_default_convention() is Convention.CALENDAR_DAYS
        assert new_calendar().convention is Convention.CALENDAR_DAYS
        assert new_calendar().days_in_year() == 365

    def test_explicit_convention_overrides_default(self):
        configure_calendar(default_convention=Convention.CALENDAR_DAYS)

        assert new_calendar("BusinessDays").convention is Convention.BUSINESS_DAYS

    def test_none_leaves_default_unchanged(self):
        configure_calendar(default_convention=Convention.CALENDAR_DAYS)
        configure_calendar()

        assert get_default_convention() is Convention.CALENDAR_DAYS

    def test_unknown_default_rejected(self):
        """Configuration is strict, unlike calendar construction."""
        with pytest.raises(ValidationError, match="Unknown convention"):
            configure_calendar(default_convention="Weekdays")

        assert get_default_convention() is Convention.BUSINESS_DAYS

    def test_reset(self):
        configure_calendar(default_convention="CalendarDays")
        reset_calendar_config()

        assert get_default_convention() is Convention.BUSINESS_DAYS

    def test_counter_follows_configured_default(self):
        """new_day_counter() and new_calendar() agree on the default."""
        configure_calendar(default_convention="CalendarDays")

        assert isinstance(new_day_counter(), PhysicalDayCounter)
        assert new_day_counter(None) is new_calendar().day_counter

    def test_counter_default_is_business_days(self):
        assert isinstance(new_day_counter(None), BusinessDayCounter)

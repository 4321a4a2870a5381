"""Strict input validation for daycal."""

from typing import Any

from daycal.convention import Convention


class ValidationError(Exception):
    """Raised when a strict check on caller input fails."""
    pass


def validate_convention(value: Any) -> Convention:
    """Return the Convention named by value.

    Calendar construction silently treats unknown names as business days.
    This check is for callers who want a typo to fail loudly instead.

    Raises:
        ValidationError: If value does not name a known convention
    """
    if isinstance(value, Convention):
        return value
    try:
        return Convention(value)
    except ValueError:
        known = ", ".join(c.value for c in Convention)
        raise ValidationError(
            f"Unknown convention: {value!r} (expected one of {known})"
        ) from None

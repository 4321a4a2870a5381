"""Apply a calendar to pandas and polars date series."""

from datetime import date
from typing import Any, Callable

import pandas as pd

from daycal.calendar import Calendar
from daycal.logging import get_logger, timed_block
from daycal.utils import _is_pandas, _is_polars
from daycal.validation import ValidationError

_log = get_logger(__name__)


def shift_dates(dates: Any, calendar: Calendar, periods: int) -> Any:
    """Shift each date by N active days of the calendar.

    Args:
        dates: pandas Series/Index or polars Series of dates or datetimes.
        calendar: Calendar defining the active days.
        periods: Signed number of active days. Zero moves inactive dates
            back to the latest active date.

    Returns:
        Container of the same library as the input. Missing values stay missing.
    """
    with timed_block(_log, "dates_shifted", rows=len(dates), periods=periods):
        return _map_dates(dates, lambda d: calendar.add(d, periods), keep_dtype=True)


def active_mask(dates: Any, calendar: Calendar) -> Any:
    """Return a boolean mask of the dates that are active in the calendar."""
    with timed_block(_log, "active_mask_computed", rows=len(dates)):
        return _map_dates(dates, calendar.is_active, keep_dtype=False)


def days_between_dates(start: Any, end: Any, calendar: Calendar) -> Any:
    """Count active days between aligned start and end dates, row by row.

    Rows where either side is missing yield a missing count.
    """
    if len(start) != len(end):
        raise ValidationError(
            f"Date series differ in length: {len(start)} != {len(end)}"
        )

    with timed_block(_log, "days_between_computed", rows=len(start)):
        if _is_polars(start) and _is_polars(end):
            return _days_between_polars(start, end, calendar)
        if _is_pandas(start) and _is_pandas(end):
            return _days_between_pandas(start, end, calendar)
    raise ValidationError(
        f"Unsupported date containers: {type(start).__name__}, {type(end).__name__}"
    )


def _map_dates(dates: Any, func: Callable[[date], Any], keep_dtype: bool) -> Any:
    """Apply func once per distinct date and broadcast the results."""
    if _is_polars(dates):
        return _map_dates_polars(dates, func, keep_dtype)
    if _is_pandas(dates):
        return _map_dates_pandas(dates, func, keep_dtype)
    raise ValidationError(f"Unsupported date container: {type(dates).__name__}")


def _map_dates_pandas(
    dates: pd.Series | pd.Index, func: Callable, keep_dtype: bool
) -> Any:
    """Map dates for a pandas Series or Index.

    Non-date results use a nullable dtype so missing dates become pd.NA.
    """
    mapping: dict[Any, Any] = {}

    def convert(value: Any) -> Any:
        if pd.isna(value):
            return value if keep_dtype else pd.NA
        if value not in mapping:
            mapping[value] = func(value)
        return mapping[value]

    result = dates.map(convert)
    return result if keep_dtype else result.astype("boolean")


def _map_dates_polars(dates: Any, func: Callable, keep_dtype: bool) -> Any:
    """Map dates for a polars Series."""
    import polars as pl

    if dates.len() == 0:
        return dates if keep_dtype else pl.Series(dates.name, [], dtype=pl.Boolean)

    # Build a distinct-date mapping and join it back in original order
    old_dates = dates.drop_nulls().unique().to_list()
    new_values = [func(d) for d in old_dates]
    value_dtype = dates.dtype if keep_dtype else pl.Boolean

    date_mapping = pl.DataFrame({
        "date_old": pl.Series(old_dates, dtype=dates.dtype),
        "date_new": pl.Series(new_values, dtype=value_dtype),
    })

    result = (
        dates.to_frame("date_old")
        .with_row_index("row")
        .join(date_mapping, on="date_old", how="left")
        .sort("row")
    )
    return result.get_column("date_new").alias(dates.name)


def _days_between_pandas(start: Any, end: Any, calendar: Calendar) -> pd.Series:
    """Row-wise active day counts for pandas inputs."""
    counts = [
        None if pd.isna(a) or pd.isna(b) else calendar.days_between(a, b)
        for a, b in zip(start, end)
    ]
    index = start.index if isinstance(start, pd.Series) else None
    return pd.Series(counts, index=index, dtype="Int64")


def _days_between_polars(start: Any, end: Any, calendar: Calendar) -> Any:
    """Row-wise active day counts for polars inputs."""
    import polars as pl

    counts = [
        None if a is None or b is None else calendar.days_between(a, b)
        for a, b in zip(start.to_list(), end.to_list())
    ]
    return pl.Series("days_between", counts, dtype=pl.Int64)

"""Common utility functions for daycal."""

from typing import Any

import pandas as pd


def _is_polars(values: Any) -> bool:
    """Check if values is a polars Series."""
    try:
        import polars as pl
        return isinstance(values, pl.Series)
    except ImportError:
        return False


def _is_pandas(values: Any) -> bool:
    """Check if values is a pandas Series or Index."""
    return isinstance(values, (pd.Series, pd.Index))

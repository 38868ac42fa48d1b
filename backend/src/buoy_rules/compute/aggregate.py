"""Reductions over a geo-filter candidate frame.

Each reduction reads the same materialised frame, so all three see one
snapshot of the store. Arg-min ties resolve to the first row in store
iteration order (pandas ``idxmin`` keeps the first occurrence).
"""

from __future__ import annotations

import pandas as pd

from buoy_rules.errors import EmptyResultSet
from buoy_rules.models import StationRecord


def mean_wind_speed(candidates: pd.DataFrame) -> float:
    """Arithmetic mean of wind speed over the candidates."""
    speeds = _numeric(candidates, "wind_speed_mph")
    if speeds.empty:
        raise EmptyResultSet("mean_wind_speed")
    return float(speeds.mean())


def argmin_wind_gust(candidates: pd.DataFrame) -> StationRecord:
    """Candidate with the lowest wind gust.

    Candidates without a gust reading cannot win.
    """
    return _argmin(candidates, "wind_gust_mph", "argmin_wind_gust")


def argmin_distance(candidates: pd.DataFrame) -> StationRecord:
    """Candidate closest to the reference point."""
    return _argmin(candidates, "distance_miles", "argmin_distance")


def _argmin(candidates: pd.DataFrame, column: str, reduction: str) -> StationRecord:
    values = _numeric(candidates, column)
    if values.empty:
        raise EmptyResultSet(reduction)
    return candidates.at[values.idxmin(), "record"]


def _numeric(candidates: pd.DataFrame, column: str) -> pd.Series:
    if candidates.empty:
        return pd.Series(dtype=float)
    return pd.to_numeric(candidates[column], errors="coerce").dropna()

"""Geo-filter: great-circle distance and radius-bounded station selection.

Distances use the haversine formula on a sphere of EARTH_RADIUS_MILES.
The store's server-side radius query uses the same constant, so rankings
from either path are comparable.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
import logging

import numpy as np
import pandas as pd

from buoy_rules.config import EARTH_RADIUS_MILES
from buoy_rules.errors import MalformedRecord
from buoy_rules.models import StationRecord

logger = logging.getLogger(__name__)

CANDIDATE_COLUMNS = ["station_id", "distance_miles", "wind_speed_mph", "wind_gust_mph", "record"]


def great_circle_miles(lon1, lat1, lon2, lat2):
    """Haversine distance in miles. Accepts scalars or numpy arrays."""
    lon1, lat1, lon2, lat2 = map(np.radians, (lon1, lat1, lon2, lat2))
    a = (
        np.sin((lat2 - lat1) / 2) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    )
    return 2 * EARTH_RADIUS_MILES * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))


def has_wind_speed(record: StationRecord) -> bool:
    """Qualifying predicate shared by all reductions."""
    return record.condition.wind_speed_mph is not None


def load_records(rows: pd.DataFrame | Iterable[dict]) -> list[StationRecord]:
    """Convert store rows to StationRecords, skipping malformed rows.

    Order is preserved. Each skipped row is logged as a warning.
    """
    if isinstance(rows, pd.DataFrame):
        rows = rows.to_dict("records")

    records = []
    for row in rows:
        try:
            records.append(StationRecord.from_row(row))
        except MalformedRecord as exc:
            logger.warning("Skipping %s", exc)
    return records


def filter_within_radius(
    records: Sequence[StationRecord],
    center: tuple[float, float],
    max_radius_miles: float,
    predicate: Callable[[StationRecord], bool] = has_wind_speed,
) -> pd.DataFrame:
    """Select records within max_radius_miles of center (lon, lat).

    Returns a candidate frame in the input (store iteration) order with one
    row per qualifying record; the ``record`` column holds a copy of the
    record annotated with its distance. Records without a location are
    dropped. An empty frame is a valid result.
    """
    located = [r for r in records if r.location is not None and predicate(r)]
    if not located:
        return pd.DataFrame(columns=CANDIDATE_COLUMNS)

    lon0, lat0 = center
    lons = np.array([r.location.lon for r in located], dtype=float)
    lats = np.array([r.location.lat for r in located], dtype=float)
    distances = great_circle_miles(lon0, lat0, lons, lats)

    keep = distances <= max_radius_miles
    rows = [
        {
            "station_id": r.station_id,
            "distance_miles": float(d),
            "wind_speed_mph": r.condition.wind_speed_mph,
            "wind_gust_mph": r.condition.wind_gust_mph,
            "record": r.with_distance(d),
        }
        for r, d, k in zip(located, distances, keep)
        if k
    ]
    logger.debug(
        "Geo-filter kept %d of %d stations within %.2f miles of %s",
        len(rows), len(records), max_radius_miles, center,
    )
    if not rows:
        return pd.DataFrame(columns=CANDIDATE_COLUMNS)
    return pd.DataFrame(rows, columns=CANDIDATE_COLUMNS)

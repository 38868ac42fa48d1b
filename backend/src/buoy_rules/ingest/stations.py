"""Buoy station seeding from a JSON registry."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import duckdb

from buoy_rules.config import STATIONS_JSON
from buoy_rules.db.queries import upsert_station

logger = logging.getLogger(__name__)


def load_station_registry(json_path: Path = STATIONS_JSON) -> list[dict]:
    """Load buoy stations from a JSON file.

    Accepts the flat row layout or the nested document layout
    (``condition`` and GeoJSON ``location``) and returns flat rows.
    """
    with open(json_path) as f:
        return [flatten_station(doc) for doc in json.load(f)]


def flatten_station(doc: dict) -> dict:
    """Flatten a nested buoy document into a dim_buoy_station row."""
    if "condition" not in doc and "location" not in doc:
        return dict(doc)

    condition = doc.get("condition") or {}
    coords = (doc.get("location") or {}).get("coordinates") or [None, None]
    return {
        "station_id": doc["station_id"],
        "name": doc.get("name", ""),
        "location_desc": doc.get("location_desc"),
        "lon": coords[0],
        "lat": coords[1],
        "wind_speed_mph": condition.get("wind_speed_milehour"),
        "wind_direction_deg": condition.get("wind_direction_degnorth"),
        "wind_gust_mph": condition.get("gust_wind_speed_milehour"),
    }


def seed_stations(conn: duckdb.DuckDBPyConnection, json_path: Path = STATIONS_JSON) -> int:
    """Populate dim_buoy_station from the JSON registry.

    Returns the number of stations upserted.
    """
    stations = load_station_registry(json_path)
    for station in stations:
        upsert_station(conn, station)
    logger.info("Seeded %d stations from %s", len(stations), json_path)
    return len(stations)

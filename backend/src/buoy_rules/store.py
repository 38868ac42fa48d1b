"""Station store: the record lookup and radius query the rule engine reads from."""

from __future__ import annotations

import logging

import duckdb

from buoy_rules.compute.geo import load_records
from buoy_rules.db.queries import (
    get_station,
    get_all_stations,
    find_stations_within_radius,
)
from buoy_rules.errors import StoreUnavailable, StationNotFound
from buoy_rules.models import StationRecord

logger = logging.getLogger(__name__)


class StationStore:
    """DuckDB-backed buoy station store.

    Every DuckDB failure surfaces as StoreUnavailable; nothing is retried.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self.conn = conn

    def find_by_identifier(self, station_id: str) -> StationRecord:
        try:
            row = get_station(self.conn, station_id)
        except duckdb.Error as exc:
            raise StoreUnavailable(f"Station lookup failed: {exc}") from exc
        if row is None:
            raise StationNotFound(station_id)
        return StationRecord.from_row(row)

    def snapshot(self) -> list[StationRecord]:
        """All valid records in store iteration order."""
        try:
            df = get_all_stations(self.conn)
        except duckdb.Error as exc:
            raise StoreUnavailable(f"Station scan failed: {exc}") from exc
        return load_records(df)

    def query_within_radius(
        self,
        center: tuple[float, float],
        max_radius_miles: float,
        require_wind_speed: bool = True,
        limit: int | None = None,
    ) -> list[StationRecord]:
        """Server-side radius query around center (lon, lat), nearest first."""
        lon, lat = center
        try:
            rows = find_stations_within_radius(
                self.conn, lat, lon, max_radius_miles,
                require_wind_speed=require_wind_speed, limit=limit,
            )
        except duckdb.Error as exc:
            raise StoreUnavailable(f"Radius query failed: {exc}") from exc
        return load_records(rows)

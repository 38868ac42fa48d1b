"""Typed query functions for the buoy station store."""

from __future__ import annotations

import duckdb
import pandas as pd

from buoy_rules.config import EARTH_RADIUS_MILES


STATION_COLUMNS = [
    "station_id", "name", "location_desc", "lon", "lat",
    "wind_speed_mph", "wind_direction_deg", "wind_gust_mph",
]


# ---------------------------------------------------------------------------
# dim_buoy_station
# ---------------------------------------------------------------------------

def upsert_station(conn: duckdb.DuckDBPyConnection, station: dict) -> None:
    """Insert or update a station row.

    An update keeps the row's original seq, so store iteration order is
    stable across refreshes of the same buoy.
    """
    conn.execute("""
        INSERT INTO dim_buoy_station (
            station_id, name, location_desc, lon, lat,
            wind_speed_mph, wind_direction_deg, wind_gust_mph
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        ON CONFLICT (station_id) DO UPDATE SET
            name = EXCLUDED.name,
            location_desc = EXCLUDED.location_desc,
            lon = EXCLUDED.lon,
            lat = EXCLUDED.lat,
            wind_speed_mph = EXCLUDED.wind_speed_mph,
            wind_direction_deg = EXCLUDED.wind_direction_deg,
            wind_gust_mph = EXCLUDED.wind_gust_mph,
            updated_at = now()
    """, [
        station["station_id"],
        station["name"],
        station.get("location_desc"),
        station.get("lon"),
        station.get("lat"),
        station.get("wind_speed_mph"),
        station.get("wind_direction_deg"),
        station.get("wind_gust_mph"),
    ])


def get_station(conn: duckdb.DuckDBPyConnection, station_id: str) -> dict | None:
    """Fetch a single station by ID."""
    result = conn.execute(
        "SELECT * FROM dim_buoy_station WHERE station_id = ?", [station_id]
    ).fetchdf()
    if result.empty:
        return None
    return result.iloc[0].to_dict()


def get_all_stations(conn: duckdb.DuckDBPyConnection) -> pd.DataFrame:
    """Fetch every station in store iteration (insertion) order."""
    return conn.execute(f"""
        SELECT {", ".join(STATION_COLUMNS)}
        FROM dim_buoy_station
        ORDER BY seq
    """).fetchdf()


def find_stations_within_radius(
    conn: duckdb.DuckDBPyConnection,
    lat: float,
    lon: float,
    radius_miles: float,
    require_wind_speed: bool = True,
    limit: int | None = None,
) -> list[dict]:
    """Find stations within radius_miles of (lat, lon), nearest first.

    Haversine on a sphere of EARTH_RADIUS_MILES, the same distance the
    in-process geo-filter uses. Rows that break the station record
    invariants are excluded before the limit is applied.
    """
    wind_clause = "AND wind_speed_mph IS NOT NULL" if require_wind_speed else ""
    limit_clause = "LIMIT ?" if limit is not None else ""
    params = [EARTH_RADIUS_MILES, lat, lat, lon, radius_miles]
    if limit is not None:
        params.append(limit)

    result = conn.execute(f"""
        SELECT * FROM (
            SELECT {", ".join(STATION_COLUMNS)}, seq,
                2 * ? * ASIN(SQRT(LEAST(1.0,
                    POWER(SIN(RADIANS(lat - ?) / 2), 2) +
                    COS(RADIANS(?)) * COS(RADIANS(lat)) *
                    POWER(SIN(RADIANS(lon - ?) / 2), 2)
                ))) AS distance_miles
            FROM dim_buoy_station
            WHERE lat BETWEEN -90 AND 90
              AND lon BETWEEN -180 AND 180
              AND (wind_speed_mph IS NULL OR wind_speed_mph >= 0 AND isfinite(wind_speed_mph))
              AND (wind_gust_mph IS NULL OR wind_gust_mph >= 0 AND isfinite(wind_gust_mph))
              AND (wind_direction_deg IS NULL OR wind_direction_deg BETWEEN 0 AND 359)
              {wind_clause}
        ) AS d
        WHERE distance_miles <= ?
        ORDER BY distance_miles, seq
        {limit_clause}
    """, params).fetchdf()

    if result.empty:
        return []
    return result.drop(columns=["seq"]).to_dict("records")


def delete_station(conn: duckdb.DuckDBPyConnection, station_id: str) -> bool:
    """Delete a station. Returns True if a row was removed."""
    removed = conn.execute(
        "DELETE FROM dim_buoy_station WHERE station_id = ? RETURNING station_id",
        [station_id],
    ).fetchall()
    return len(removed) > 0


def count_stations(conn: duckdb.DuckDBPyConnection) -> int:
    return conn.execute("SELECT COUNT(*) FROM dim_buoy_station").fetchone()[0]

"""Shared test fixtures."""

import pytest

from buoy_rules.db.connection import get_memory_connection
from buoy_rules.db.queries import upsert_station
from buoy_rules.db.schema import create_all_tables
from buoy_rules.models import RuleConfig
from buoy_rules.store import StationStore


# Clearwater, FL (lon, lat)
CLEARWATER = (-82.798676, 27.945886)


@pytest.fixture
def db():
    """In-memory DuckDB with all tables created."""
    conn = get_memory_connection()
    create_all_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def store(db) -> StationStore:
    return StationStore(db)


@pytest.fixture
def sample_station() -> dict:
    """A sample buoy station for testing."""
    return {
        "station_id": "CWBF1",
        "name": "Station CWBF1 - Clearwater Beach, FL",
        "location_desc": "Clearwater Beach, FL",
        "lon": -82.832,
        "lat": 27.978,
        "wind_speed_mph": 8.1,
        "wind_direction_deg": 250,
        "wind_gust_mph": 11.5,
    }


@pytest.fixture
def tampa_rule() -> RuleConfig:
    return RuleConfig(
        name="tampa",
        latitude=CLEARWATER[1],
        longitude=CLEARWATER[0],
        max_radius_miles=30.0,
        max_avg_wind_speed=15.0,
    )


def _make_station(
    station_id: str,
    lon: float,
    lat: float,
    wind_speed: float | None,
    wind_gust: float | None = None,
    wind_direction: int | None = 180,
) -> dict:
    return {
        "station_id": station_id,
        "name": f"Station {station_id}",
        "location_desc": "Tampa Bay, FL",
        "lon": lon,
        "lat": lat,
        "wind_speed_mph": wind_speed,
        "wind_direction_deg": wind_direction,
        "wind_gust_mph": wind_gust,
    }


@pytest.fixture
def station_row():
    """Factory for dim_buoy_station rows."""
    return _make_station


@pytest.fixture
def tampa_stations() -> list[dict]:
    """Three qualifying buoys near Clearwater plus two that never qualify.

    Wind speeds 10, 12, 20 (mean 14.0); ST3 is the closest, ST2 has the
    lowest gust. FAR1 is ~80 miles away, NOWIND has no wind reading.
    """
    return [
        _make_station("ST1", -82.70, 27.80, 10.0, wind_gust=14.0),   # ~11.8 mi
        _make_station("ST2", -82.60, 28.05, 12.0, wind_gust=6.0),    # ~14.1 mi
        _make_station("FAR1", -83.03, 29.13, 2.0, wind_gust=1.0),    # outside radius
        _make_station("ST3", -82.81, 27.96, 20.0, wind_gust=25.0),   # ~1.2 mi
        _make_station("NOWIND", -82.80, 27.95, None, wind_gust=None),
    ]


@pytest.fixture
def seeded_db(db, tampa_stations):
    for station in tampa_stations:
        upsert_station(db, station)
    return db

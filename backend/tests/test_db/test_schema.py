"""Tests for DuckDB schema creation."""

from buoy_rules.db.schema import create_all_tables


def test_create_all_tables(db):
    tables = db.execute(
        "SELECT table_name FROM information_schema.tables WHERE table_schema = 'main'"
    ).fetchdf()
    assert set(tables["table_name"].tolist()) == {"dim_buoy_station"}


def test_create_tables_idempotent(db):
    """Running create_all_tables twice should not raise."""
    create_all_tables(db)
    tables = db.execute(
        "SELECT table_name FROM information_schema.tables WHERE table_schema = 'main'"
    ).fetchdf()
    assert len(tables) == 1


def test_dim_buoy_station_columns(db):
    cols = db.execute(
        "SELECT column_name FROM information_schema.columns "
        "WHERE table_name = 'dim_buoy_station' ORDER BY ordinal_position"
    ).fetchdf()
    expected = [
        "station_id", "name", "location_desc", "lon", "lat",
        "wind_speed_mph", "wind_direction_deg", "wind_gust_mph",
        "seq", "updated_at",
    ]
    assert cols["column_name"].tolist() == expected

"""DDL for the buoy station store."""

import duckdb


def create_all_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create all tables if they don't already exist."""

    # seq records insertion order; it is the store's iteration order
    conn.execute("CREATE SEQUENCE IF NOT EXISTS seq_buoy_station START 1")

    conn.execute("""
        CREATE TABLE IF NOT EXISTS dim_buoy_station (
            station_id         VARCHAR PRIMARY KEY,
            name               VARCHAR NOT NULL,
            location_desc      VARCHAR,
            lon                DOUBLE,
            lat                DOUBLE,
            wind_speed_mph     DOUBLE,
            wind_direction_deg INTEGER,
            wind_gust_mph      DOUBLE,
            seq                BIGINT DEFAULT nextval('seq_buoy_station'),
            updated_at         TIMESTAMP DEFAULT current_timestamp
        )
    """)

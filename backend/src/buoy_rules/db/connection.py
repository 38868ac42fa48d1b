"""Connections to the buoy station database."""

from pathlib import Path

import duckdb

from buoy_rules.config import DB_PATH


def get_connection(db_path: Path | str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open the buoy station database file, creating its directory if needed."""
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return duckdb.connect(str(path))


def get_memory_connection() -> duckdb.DuckDBPyConnection:
    """An empty in-memory station database, used by the test fixtures."""
    return duckdb.connect(":memory:")

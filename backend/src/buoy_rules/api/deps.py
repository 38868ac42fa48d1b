"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Generator

from fastapi import Request

from buoy_rules.store import StationStore


def get_store(request: Request) -> Generator[StationStore, None, None]:
    """Provide a StationStore over a per-request cursor."""
    cursor = request.app.state.db.cursor()
    try:
        yield StationStore(cursor)
    finally:
        cursor.close()

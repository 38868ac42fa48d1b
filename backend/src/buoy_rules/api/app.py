"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from buoy_rules.config import DB_PATH
from buoy_rules.db.connection import get_connection
from buoy_rules.db.schema import create_all_tables


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the station database on startup, close it on shutdown."""
    conn = get_connection(app.state.db_path)
    create_all_tables(conn)
    app.state.db = conn
    yield
    conn.close()


def create_app(db_path: Path | str = DB_PATH) -> FastAPI:
    app = FastAPI(
        title="Buoy Rules API",
        version="0.1.0",
        description="Buoy-station rules: should we go fishing?",
        lifespan=lifespan,
    )
    app.state.db_path = db_path

    from buoy_rules.api.routers import stations, rules

    app.include_router(stations.router, prefix="/stations", tags=["stations"])
    app.include_router(rules.router, prefix="/rules", tags=["rules"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app

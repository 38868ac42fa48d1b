"""Station lookup endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from buoy_rules.api.deps import get_store
from buoy_rules.api.schemas import StationResponse
from buoy_rules.errors import MalformedRecord, StationNotFound, StoreUnavailable
from buoy_rules.store import StationStore

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/nearby", response_model=list[StationResponse])
def get_nearby(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude"),
    radius_miles: float = Query(30.0, ge=0, description="Search radius in miles"),
    limit: int = Query(10, ge=1, le=100),
    require_wind_speed: bool = Query(False, description="Only stations reporting wind speed"),
    store: StationStore = Depends(get_store),
) -> list[StationResponse]:
    """Find buoy stations near a coordinate, nearest first."""
    try:
        records = store.query_within_radius(
            (lon, lat), radius_miles, require_wind_speed=require_wind_speed, limit=limit,
        )
    except StoreUnavailable as exc:
        raise HTTPException(503, str(exc))
    return [StationResponse.from_record(r) for r in records]


@router.get("/{station_id}", response_model=StationResponse)
def get_station_detail(
    station_id: str,
    store: StationStore = Depends(get_store),
) -> StationResponse:
    """Get details for a specific station."""
    try:
        record = store.find_by_identifier(station_id)
    except StationNotFound as exc:
        raise HTTPException(404, str(exc))
    except MalformedRecord as exc:
        logger.warning("Station %s failed validation: %s", station_id, exc.reason)
        raise HTTPException(422, str(exc))
    except StoreUnavailable as exc:
        raise HTTPException(503, str(exc))
    return StationResponse.from_record(record)

"""Pydantic response models for the API."""

from __future__ import annotations

from pydantic import BaseModel

from buoy_rules.models import RuleConfig, StationRecord, Verdict


class StationResponse(BaseModel):
    station_id: str
    name: str
    location_desc: str | None = None
    lat: float | None = None
    lon: float | None = None
    wind_speed_mph: float | None = None
    wind_direction_deg: int | None = None
    wind_gust_mph: float | None = None
    distance_miles: float | None = None

    @classmethod
    def from_record(cls, record: StationRecord) -> StationResponse:
        return cls(**record.to_dict())


class RuleResponse(BaseModel):
    name: str
    latitude: float
    longitude: float
    max_radius_miles: float
    max_avg_wind_speed: float
    description: str = ""

    @classmethod
    def from_config(cls, config: RuleConfig) -> RuleResponse:
        return cls(
            name=config.name,
            latitude=config.latitude,
            longitude=config.longitude,
            max_radius_miles=config.max_radius_miles,
            max_avg_wind_speed=config.max_avg_wind_speed,
            description=config.description,
        )


class VerdictResponse(BaseModel):
    rule_name: str
    status: str
    avg_wind_speed: float
    max_avg_wind_speed: float
    station_count: int
    lowest_gust: StationResponse | None = None
    closest: StationResponse | None = None

    @classmethod
    def from_verdict(cls, verdict: Verdict, config: RuleConfig) -> VerdictResponse:
        return cls(
            rule_name=verdict.rule_name,
            status=verdict.status.value,
            avg_wind_speed=verdict.avg_wind_speed,
            max_avg_wind_speed=config.max_avg_wind_speed,
            station_count=verdict.station_count,
            lowest_gust=StationResponse.from_record(verdict.lowest_gust) if verdict.lowest_gust else None,
            closest=StationResponse.from_record(verdict.closest) if verdict.closest else None,
        )

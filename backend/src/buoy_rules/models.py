"""Value objects for buoy stations, rule configurations and verdicts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
import math

import pandas as pd

from buoy_rules.config import EARTH_RADIUS_MILES
from buoy_rules.errors import MalformedRecord


@dataclass(frozen=True)
class Location:
    """A (longitude, latitude) pair; longitude first, per GeoJSON."""
    lon: float
    lat: float

    @property
    def coordinates(self) -> list[float]:
        return [self.lon, self.lat]


@dataclass(frozen=True)
class Condition:
    """Latest wind observation for a buoy. None means no sensor reading."""
    wind_speed_mph: float | None = None
    wind_direction_deg: int | None = None  # degrees from true north
    wind_gust_mph: float | None = None


@dataclass(frozen=True)
class StationRecord:
    station_id: str
    name: str = ""
    location_desc: str = ""
    location: Location | None = None
    condition: Condition = field(default_factory=Condition)
    # Derived per query, never persisted
    distance_miles: float | None = field(default=None, compare=False)

    def __post_init__(self):
        if self.location is not None:
            _check_location(self.station_id, self.location)
        _check_condition(self.station_id, self.condition)

    def with_distance(self, distance_miles: float) -> StationRecord:
        """Return a copy annotated with its distance from a reference point."""
        return replace(self, distance_miles=float(distance_miles))

    @classmethod
    def from_row(cls, row: dict) -> StationRecord:
        """Build a record from a dim_buoy_station row.

        NaN / NA values are treated as absent readings. Raises MalformedRecord
        when a value violates the record invariants.
        """
        station_id = _clean(row.get("station_id"))
        if not station_id:
            raise MalformedRecord(None, "missing station_id")

        lon, lat = _clean(row.get("lon")), _clean(row.get("lat"))
        if lon is None and lat is None:
            location = None
        elif lon is None or lat is None:
            raise MalformedRecord(station_id, "incomplete coordinates")
        else:
            location = Location(lon=float(lon), lat=float(lat))

        direction = _clean(row.get("wind_direction_deg"))
        speed = _clean(row.get("wind_speed_mph"))
        gust = _clean(row.get("wind_gust_mph"))
        condition = Condition(
            wind_speed_mph=None if speed is None else float(speed),
            wind_direction_deg=None if direction is None else int(direction),
            wind_gust_mph=None if gust is None else float(gust),
        )

        return cls(
            station_id=str(station_id),
            name=_clean(row.get("name")) or "",
            location_desc=_clean(row.get("location_desc")) or "",
            location=location,
            condition=condition,
            distance_miles=_clean(row.get("distance_miles")),
        )

    def to_dict(self) -> dict:
        return {
            "station_id": self.station_id,
            "name": self.name,
            "location_desc": self.location_desc,
            "lon": self.location.lon if self.location else None,
            "lat": self.location.lat if self.location else None,
            "wind_speed_mph": self.condition.wind_speed_mph,
            "wind_direction_deg": self.condition.wind_direction_deg,
            "wind_gust_mph": self.condition.wind_gust_mph,
            "distance_miles": self.distance_miles,
        }


@dataclass(frozen=True)
class RuleConfig:
    """One evaluable rule: a reference point, a radius and a wind threshold."""
    name: str
    latitude: float
    longitude: float
    max_radius_miles: float
    max_avg_wind_speed: float
    description: str = ""

    def __post_init__(self):
        try:
            _check_location(self.name, Location(lon=self.longitude, lat=self.latitude))
        except MalformedRecord as exc:
            raise ValueError(f"Rule {self.name}: {exc.reason}") from exc
        if not self.max_radius_miles >= 0:
            raise ValueError(f"max_radius_miles must be >= 0, got {self.max_radius_miles}")
        if not self.max_avg_wind_speed >= 0:
            raise ValueError(f"max_avg_wind_speed must be >= 0, got {self.max_avg_wind_speed}")

    @property
    def center(self) -> tuple[float, float]:
        """Reference point as (lon, lat)."""
        return (self.longitude, self.latitude)

    @property
    def max_distance_radians(self) -> float:
        return self.max_radius_miles / EARTH_RADIUS_MILES


class VerdictStatus(str, Enum):
    SAFE = "safe"
    UNSAFE = "unsafe"


@dataclass(frozen=True)
class Verdict:
    rule_name: str
    status: VerdictStatus
    avg_wind_speed: float
    station_count: int
    lowest_gust: StationRecord | None = None
    closest: StationRecord | None = None

    @property
    def is_safe(self) -> bool:
        return self.status == VerdictStatus.SAFE


def _clean(value):
    """Map pandas/numpy missing markers to None and numpy scalars to Python."""
    try:
        if value is None or pd.isna(value):
            return None
    except (TypeError, ValueError):
        return value
    if hasattr(value, "item"):  # numpy scalar
        return value.item()
    return value


def _check_location(station_id: str, location: Location) -> None:
    lon, lat = location.lon, location.lat
    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise MalformedRecord(station_id, f"non-finite coordinates ({lon}, {lat})")
    if not -180.0 <= lon <= 180.0:
        raise MalformedRecord(station_id, f"longitude {lon} out of range")
    if not -90.0 <= lat <= 90.0:
        raise MalformedRecord(station_id, f"latitude {lat} out of range")


def _check_condition(station_id: str, condition: Condition) -> None:
    for label, value in (
        ("wind speed", condition.wind_speed_mph),
        ("wind gust", condition.wind_gust_mph),
    ):
        if value is not None and not (math.isfinite(value) and value >= 0):
            raise MalformedRecord(station_id, f"{label} {value} is not a non-negative reading")
    direction = condition.wind_direction_deg
    if direction is not None and not 0 <= direction <= 359:
        raise MalformedRecord(station_id, f"wind direction {direction} out of range")

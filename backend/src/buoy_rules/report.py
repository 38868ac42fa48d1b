"""Plain-text rendering of verdicts for the CLI."""

from __future__ import annotations

from buoy_rules.models import StationRecord, Verdict


def format_station(title: str, record: StationRecord, extra: dict[str, str] | None = None) -> str:
    """Render one station block with an optional set of extra fields."""
    lat = lon = None
    if record.location is not None:
        lon, lat = record.location.coordinates
    cond = record.condition

    lines = [
        title,
        _field("Station Id", record.station_id),
        _field("Name", record.name),
        _field("Location", record.location_desc),
        _field("Latitude", _num(lat, "{:f}")),
        _field("Longitude", _num(lon, "{:f}")),
        _field("Distance", _num(record.distance_miles, "{:f} Miles")),
        _field("Wind Speed", _num(cond.wind_speed_mph, "{:.2f} Miles/Hour")),
        _field("Wind Direction", _num(cond.wind_direction_deg, "{:d} From True North")),
        _field("Wind Gust", _num(cond.wind_gust_mph, "{:.2f} Miles/Hour")),
    ]
    for name, value in (extra or {}).items():
        lines.append(_field(name, value))
    return "\n".join(lines)


def format_verdict(verdict: Verdict) -> str:
    place = verdict.rule_name.title()
    if not verdict.is_safe:
        return (
            f"*** Stay Home, {place} Is Not Good : "
            f"Average Wind Speed Is {verdict.avg_wind_speed:.2f} ***"
        )

    extra = {"Avg Wind Speed": f"{verdict.avg_wind_speed:.2f} Miles Per Hour"}
    return "\n\n".join([
        format_station(f"{place} Buoy With Lowest Wind Gust", verdict.lowest_gust, extra),
        format_station(f"{place} Buoy Closest To Your Location", verdict.closest, extra),
    ])


def format_error(exc: Exception) -> str:
    return f"ERROR : {exc}"


def _field(label: str, value) -> str:
    return f"{label:<16}: {value}"


def _num(value, fmt: str) -> str:
    return "n/a" if value is None else fmt.format(value)

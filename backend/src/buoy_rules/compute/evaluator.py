"""Rule evaluation.

Orchestrates: snapshot -> geo-filter -> mean wind speed -> threshold ->
lowest gust + closest buoy -> verdict. The first error ends the
evaluation; there are no partial verdicts and no retries.
"""

from __future__ import annotations

import logging

from buoy_rules.compute.aggregate import (
    mean_wind_speed,
    argmin_wind_gust,
    argmin_distance,
)
from buoy_rules.compute.geo import filter_within_radius
from buoy_rules.models import RuleConfig, Verdict, VerdictStatus
from buoy_rules.rules import DEFAULT_REGISTRY, RuleRegistry
from buoy_rules.store import StationStore

logger = logging.getLogger(__name__)


def evaluate(store: StationStore, config: RuleConfig) -> Verdict:
    """Evaluate one rule against a single snapshot of the store.

    Raises EmptyResultSet when no station qualifies and StoreUnavailable
    when the store cannot be read.
    """
    records = store.snapshot()
    candidates = filter_within_radius(records, config.center, config.max_radius_miles)
    logger.info(
        "Rule %s: %d of %d stations within %.1f miles",
        config.name, len(candidates), len(records), config.max_radius_miles,
    )

    avg_wind_speed = mean_wind_speed(candidates)
    if avg_wind_speed > config.max_avg_wind_speed:
        logger.info("Rule %s: unsafe, average wind speed %.2f", config.name, avg_wind_speed)
        return Verdict(
            rule_name=config.name,
            status=VerdictStatus.UNSAFE,
            avg_wind_speed=avg_wind_speed,
            station_count=len(candidates),
        )

    lowest_gust = argmin_wind_gust(candidates)
    closest = argmin_distance(candidates)

    logger.info(
        "Rule %s: safe, average wind speed %.2f (lowest gust %s, closest %s)",
        config.name, avg_wind_speed, lowest_gust.station_id, closest.station_id,
    )
    return Verdict(
        rule_name=config.name,
        status=VerdictStatus.SAFE,
        avg_wind_speed=avg_wind_speed,
        station_count=len(candidates),
        lowest_gust=lowest_gust,
        closest=closest,
    )


class RuleEvaluator:
    """Evaluates named rules against a station store."""

    def __init__(self, store: StationStore, registry: RuleRegistry = DEFAULT_REGISTRY):
        self.store = store
        self.registry = registry

    def evaluate(self, rule_name: str, config: RuleConfig | None = None) -> Verdict:
        if config is None:
            config = self.registry.get(rule_name)
        return evaluate(self.store, config)

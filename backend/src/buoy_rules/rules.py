"""Rule registry: named rule configurations.

Adding a rule is a table entry; the evaluator never branches on names.
Registries are immutable; ``with_rule`` returns an extended copy.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from buoy_rules.config import (
    TAMPA_LATITUDE,
    TAMPA_LONGITUDE,
    TAMPA_MAX_RADIUS_MILES,
    TAMPA_MAX_AVG_WIND_SPEED,
)
from buoy_rules.errors import UnknownRule
from buoy_rules.models import RuleConfig


class RuleRegistry:
    """Read-only mapping of rule names to RuleConfig."""

    def __init__(self, configs: Iterable[RuleConfig] = ()):
        self._rules = MappingProxyType({c.name: c for c in configs})

    @property
    def rules(self) -> Mapping[str, RuleConfig]:
        return self._rules

    def get(self, name: str) -> RuleConfig:
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRule(name) from None

    def with_rule(self, config: RuleConfig) -> RuleRegistry:
        """A new registry with config added (or replacing one of the same name)."""
        merged = dict(self._rules)
        merged[config.name] = config
        return RuleRegistry(merged.values())

    def names(self) -> list[str]:
        return sorted(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


DEFAULT_REGISTRY = RuleRegistry([
    RuleConfig(
        name="tampa",
        latitude=TAMPA_LATITUDE,
        longitude=TAMPA_LONGITUDE,
        max_radius_miles=TAMPA_MAX_RADIUS_MILES,
        max_avg_wind_speed=TAMPA_MAX_AVG_WIND_SPEED,
        description="Should we go fishing in Tampa? Buoys within 30 miles of Clearwater, FL",
    ),
])

RULES: Mapping[str, RuleConfig] = DEFAULT_REGISTRY.rules


def get_rule(name: str) -> RuleConfig:
    return DEFAULT_REGISTRY.get(name)


def rule_names() -> list[str]:
    return DEFAULT_REGISTRY.names()

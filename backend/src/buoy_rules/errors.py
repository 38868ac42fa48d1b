"""Exceptions raised by the store, the geo-filter and the rule evaluator."""

from __future__ import annotations


class BuoyRulesError(Exception):
    """Base class for all buoy-rules errors."""


class StoreUnavailable(BuoyRulesError):
    """The station store could not be reached or a query failed."""


class StationNotFound(BuoyRulesError):
    def __init__(self, station_id: str):
        self.station_id = station_id
        super().__init__(f"Station {station_id} not found")


class EmptyResultSet(BuoyRulesError):
    """No qualifying records were available for a reduction."""

    def __init__(self, reduction: str):
        self.reduction = reduction
        super().__init__(f"No qualifying stations for {reduction}")


class MalformedRecord(BuoyRulesError):
    """A fetched record violates the station record invariants."""

    def __init__(self, station_id: str | None, reason: str):
        self.station_id = station_id
        self.reason = reason
        super().__init__(f"Malformed station record {station_id!r}: {reason}")


class UnknownRule(BuoyRulesError):
    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(f"Unknown rule {rule_name!r}")

"""Tests for rule evaluation."""

import duckdb
import pytest

from buoy_rules.compute.evaluator import evaluate, RuleEvaluator
from buoy_rules.db.queries import upsert_station
from buoy_rules.errors import EmptyResultSet, StoreUnavailable, UnknownRule
from buoy_rules.models import RuleConfig, VerdictStatus
from buoy_rules.rules import DEFAULT_REGISTRY
from buoy_rules.store import StationStore


def _seed(db, rows):
    for row in rows:
        upsert_station(db, row)
    return StationStore(db)


class TestEvaluate:
    def test_safe_verdict(self, seeded_db, tampa_rule):
        verdict = evaluate(StationStore(seeded_db), tampa_rule)
        assert verdict.status == VerdictStatus.SAFE
        assert verdict.is_safe
        assert verdict.avg_wind_speed == pytest.approx(14.0)
        assert verdict.station_count == 3
        assert verdict.lowest_gust.station_id == "ST2"
        assert verdict.closest.station_id == "ST3"

    def test_radius_matches_angular_form(self, tampa_rule):
        assert tampa_rule.max_distance_radians == pytest.approx(30 / 3963.192)

    def test_unsafe_verdict_carries_mean(self, db, station_row, tampa_rule):
        store = _seed(db, [
            station_row("A", -82.70, 27.80, 10.0, wind_gust=12.0),
            station_row("B", -82.60, 28.05, 20.0, wind_gust=25.0),
            station_row("C", -82.81, 27.96, 30.0, wind_gust=35.0),
        ])
        verdict = evaluate(store, tampa_rule)
        assert verdict.status == VerdictStatus.UNSAFE
        assert verdict.avg_wind_speed == pytest.approx(20.0)
        assert verdict.lowest_gust is None
        assert verdict.closest is None

    def test_threshold_is_inclusive(self, db, station_row, tampa_rule):
        store = _seed(db, [station_row("A", -82.80, 27.95, 15.0, wind_gust=18.0)])
        assert evaluate(store, tampa_rule).status == VerdictStatus.SAFE

    def test_no_station_in_radius_fails(self, seeded_db, tampa_rule):
        config = RuleConfig(
            name="tampa",
            latitude=tampa_rule.latitude,
            longitude=tampa_rule.longitude,
            max_radius_miles=0.0,
            max_avg_wind_speed=15.0,
        )
        with pytest.raises(EmptyResultSet):
            evaluate(StationStore(seeded_db), config)

    def test_empty_store_fails(self, store, tampa_rule):
        with pytest.raises(EmptyResultSet):
            evaluate(store, tampa_rule)

    def test_missing_gusts_fail_safe_path(self, db, station_row, tampa_rule):
        store = _seed(db, [station_row("A", -82.80, 27.95, 5.0, wind_gust=None)])
        with pytest.raises(EmptyResultSet) as exc_info:
            evaluate(store, tampa_rule)
        assert exc_info.value.reduction == "argmin_wind_gust"

    def test_gust_tie_is_deterministic(self, db, station_row, tampa_rule):
        store = _seed(db, [
            station_row("ZULU", -82.70, 27.80, 10.0, wind_gust=5.0),
            station_row("ALPHA", -82.60, 28.05, 10.0, wind_gust=5.0),
        ])
        results = {evaluate(store, tampa_rule).lowest_gust.station_id for _ in range(5)}
        assert results == {"ZULU"}

    def test_idempotent(self, seeded_db, tampa_rule):
        store = StationStore(seeded_db)
        assert evaluate(store, tampa_rule) == evaluate(store, tampa_rule)

    def test_malformed_rows_skipped(self, seeded_db, station_row, tampa_rule):
        upsert_station(seeded_db, station_row("BROKEN", -82.80, 127.0, 99.0))
        verdict = evaluate(StationStore(seeded_db), tampa_rule)
        assert verdict.avg_wind_speed == pytest.approx(14.0)

    def test_store_unavailable(self, tampa_rule):
        conn = duckdb.connect(":memory:")
        conn.close()
        with pytest.raises(StoreUnavailable):
            evaluate(StationStore(conn), tampa_rule)


class TestRuleEvaluator:
    def test_named_rule(self, seeded_db):
        verdict = RuleEvaluator(StationStore(seeded_db)).evaluate("tampa")
        assert verdict.rule_name == "tampa"
        assert verdict.is_safe

    def test_explicit_config(self, seeded_db, tampa_rule):
        strict = RuleConfig(
            name="strict",
            latitude=tampa_rule.latitude,
            longitude=tampa_rule.longitude,
            max_radius_miles=30.0,
            max_avg_wind_speed=5.0,
        )
        verdict = RuleEvaluator(StationStore(seeded_db)).evaluate("strict", strict)
        assert verdict.status == VerdictStatus.UNSAFE

    def test_unknown_rule(self, store):
        with pytest.raises(UnknownRule):
            RuleEvaluator(store).evaluate("atlantis")

    def test_injected_registry(self, seeded_db, tampa_rule):
        strict = RuleConfig(
            name="strict",
            latitude=tampa_rule.latitude,
            longitude=tampa_rule.longitude,
            max_radius_miles=30.0,
            max_avg_wind_speed=5.0,
        )
        evaluator = RuleEvaluator(
            StationStore(seeded_db), registry=DEFAULT_REGISTRY.with_rule(strict)
        )
        assert evaluator.evaluate("strict").status == VerdictStatus.UNSAFE
        assert evaluator.evaluate("tampa").is_safe
        with pytest.raises(UnknownRule):
            RuleEvaluator(StationStore(seeded_db)).evaluate("strict")

"""CLI entry point for buoy-rules."""

import argparse
import logging
import os
import sys
from pathlib import Path

from buoy_rules.config import DB_PATH, STATIONS_JSON
from buoy_rules.errors import BuoyRulesError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="buoy-rules",
        description="Buoy station rules: should we go fishing?",
    )
    parser.add_argument("--db", type=Path, default=DB_PATH, help="DuckDB database path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # seed subcommand
    seed_parser = subparsers.add_parser("seed", help="Load buoy stations from JSON")
    seed_parser.add_argument("--json", type=Path, default=STATIONS_JSON, help="Station JSON file")

    # run subcommand
    run_parser = subparsers.add_parser("run", help="Evaluate a rule")
    run_parser.add_argument("rule", help="Rule name (e.g. tampa)")

    # station subcommand
    station_parser = subparsers.add_parser("station", help="Show one buoy station")
    station_parser.add_argument("station_id", help="Station ID (e.g. CWBF1)")

    subparsers.add_parser("rules", help="List configured rules")
    serve_parser = subparsers.add_parser("serve", help="Serve the rules API over HTTP")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument(
        "--port", type=int, default=int(os.environ.get("PORT", "8000")),
        help="Bind port (defaults to $PORT, then 8000)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if args.command == "serve":
        _serve(args)
    elif args.command == "rules":
        _rules()
    else:
        try:
            if args.command == "seed":
                _seed(args)
            elif args.command == "run":
                _run(args)
            elif args.command == "station":
                _station(args)
        except BuoyRulesError as exc:
            from buoy_rules.report import format_error
            print(format_error(exc), file=sys.stderr)
            sys.exit(1)


def _serve(args: argparse.Namespace) -> None:
    import uvicorn

    from buoy_rules.api.app import create_app

    uvicorn.run(create_app(args.db), host=args.host, port=args.port)


def _rules() -> None:
    from buoy_rules.rules import RULES, rule_names

    for name in rule_names():
        config = RULES[name]
        print(f"{name}\t{config.description}")


def _open_store(db_path: Path):
    import duckdb

    from buoy_rules.db.connection import get_connection
    from buoy_rules.db.schema import create_all_tables
    from buoy_rules.errors import StoreUnavailable
    from buoy_rules.store import StationStore

    try:
        conn = get_connection(db_path)
        create_all_tables(conn)
    except duckdb.Error as exc:
        raise StoreUnavailable(f"Cannot open {db_path}: {exc}") from exc
    return StationStore(conn)


def _seed(args: argparse.Namespace) -> None:
    from buoy_rules.ingest.stations import seed_stations

    store = _open_store(args.db)
    try:
        count = seed_stations(store.conn, args.json)
    finally:
        store.conn.close()
    print(f"Seeded {count} stations.")


def _run(args: argparse.Namespace) -> None:
    from buoy_rules.compute.evaluator import RuleEvaluator
    from buoy_rules.report import format_verdict

    store = _open_store(args.db)
    try:
        verdict = RuleEvaluator(store).evaluate(args.rule)
    finally:
        store.conn.close()
    print(format_verdict(verdict))


def _station(args: argparse.Namespace) -> None:
    from buoy_rules.report import format_station

    store = _open_store(args.db)
    try:
        record = store.find_by_identifier(args.station_id)
    finally:
        store.conn.close()
    print(format_station(f"Station {record.station_id}", record))


if __name__ == "__main__":
    main()

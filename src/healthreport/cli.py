"""Command-line interface for healthreport."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from healthreport.config.settings import Settings
from healthreport.console.logger import ReportConsole
from healthreport.core.errors import ValidationError
from healthreport.core.models import ReportSection
from healthreport.core.utils import coerce_date
from healthreport.reports.catalog import ReportingQueries
from healthreport.reports.queries import CATALOG
from healthreport.reports.runner import LOOKUP_QUERIES, ReportRunner
from healthreport.storage.database import HealthcareDatabase
from healthreport.tools.sql import SQLValidator


console = ReportConsole()


def parse_params(pairs: list[str] | None) -> dict[str, Any]:
    """Turn ``key=value`` pairs into keyword arguments; integers are converted."""
    params: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValidationError("param", f"expected key=value, got {pair!r}")
        params[key.strip()] = int(value) if value.strip().lstrip("-").isdigit() else value
    return params


def init_db(settings: Settings, db_path: str, load_sample: bool = True) -> None:
    """Create the schema and optionally load the sample dataset."""
    db = HealthcareDatabase.from_settings(settings, db_path)
    db.initialize()
    if load_sample and not db.load_sample_data():
        console.console.print("[yellow]Store already has data, sample not loaded[/yellow]")
    console.print_db_stats(db_path, db.get_stats())
    console.print_success(f"Store initialized at {db_path}")


def show_stats(settings: Settings, db_path: str) -> None:
    db = HealthcareDatabase.from_settings(settings, db_path)
    console.print_db_stats(db_path, db.get_stats())


def run_query(
    settings: Settings, db_path: str, name: str, params: dict[str, Any], max_rows: int | None
) -> None:
    """Run one catalog query and print its rows."""
    db = HealthcareDatabase.from_settings(settings, db_path)
    queries = ReportingQueries(db, settings.reports.dosage_policy)
    rows = queries.run(name, **params)
    definition = CATALOG[name]
    section = ReportSection.from_rows(name, definition.title, definition.row_type, rows)
    console.print_section(section, max_rows)


def build_report(
    settings: Settings, db_path: str, output_path: str, as_of: str | None = None
) -> None:
    """Run the whole catalog and write an HTML report."""
    reference_date = coerce_date("as_of", as_of) if as_of else None
    db = HealthcareDatabase.from_settings(settings, db_path)
    runner = ReportRunner(ReportingQueries(db, settings.reports.dosage_policy), settings)
    console.print_header(db_path, reference_date.isoformat() if reference_date else None)
    with console.report_progress(len(CATALOG) - len(LOOKUP_QUERIES)) as advance:
        report = runner.build(db_path, reference_date, on_section=advance)
    output = runner.write_html(report, output_path)
    console.print_report_summary(report)
    console.print_success("Report generated successfully!", str(output))


def show_catalog(show_sql: bool = False) -> None:
    """List catalog queries, optionally with their formatted SQL."""
    definitions = ReportingQueries.catalog()
    console.print_catalog(definitions)
    if show_sql:
        validator = SQLValidator()
        for definition in definitions:
            console.print_sql(definition.name, validator.format_sql(definition.sql))


def check_catalog() -> bool:
    """Validate every catalog statement; True when all pass."""
    checks = SQLValidator().check_catalog()
    console.print_checks(checks)
    return all(c.ok for c in checks)


def main() -> None:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="healthreport", description="Analytical reports over a healthcare store"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show log output")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    init_cmd = subparsers.add_parser("init-db", help="Create the schema and load sample data")
    init_cmd.add_argument("--db", help="Database path")
    init_cmd.add_argument("--empty", action="store_true", help="Don't load the sample dataset")

    stats_cmd = subparsers.add_parser("stats", help="Show row counts per table")
    stats_cmd.add_argument("--db", help="Database path")

    catalog_cmd = subparsers.add_parser("catalog", help="List available queries")
    catalog_cmd.add_argument("--sql", action="store_true", help="Also print each statement")

    query_cmd = subparsers.add_parser("query", help="Run one catalog query")
    query_cmd.add_argument("name", choices=sorted(CATALOG), metavar="NAME", help="Query name")
    query_cmd.add_argument(
        "--param", "-p", action="append", metavar="KEY=VALUE", help="Query parameter"
    )
    query_cmd.add_argument("--db", help="Database path")
    query_cmd.add_argument("--max-rows", type=int, help="Limit printed rows")

    report_cmd = subparsers.add_parser("report", help="Run every query into an HTML report")
    report_cmd.add_argument("output_path", help="Path for the output HTML report")
    report_cmd.add_argument("--db", help="Database path")
    report_cmd.add_argument("--as-of", help="Reference date (YYYY-MM-DD), default today")

    subparsers.add_parser("check", help="Validate catalog SQL against the schema")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    settings = Settings()
    console.verbose = args.verbose
    console.setup_logging(settings.log_level)
    db_path = getattr(args, "db", None) or settings.database.path

    try:
        if args.command == "init-db":
            init_db(settings, db_path, not args.empty)
        elif args.command == "stats":
            show_stats(settings, db_path)
        elif args.command == "catalog":
            show_catalog(args.sql)
        elif args.command == "query":
            run_query(settings, db_path, args.name, parse_params(args.param), args.max_rows)
        elif args.command == "report":
            if not Path(db_path).exists():
                console.print_error(f"Database not found: {db_path}")
                sys.exit(1)
            build_report(settings, db_path, args.output_path, args.as_of)
        elif args.command == "check" and not check_catalog():
            sys.exit(1)
    except KeyboardInterrupt:
        console.console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()

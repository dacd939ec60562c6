"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table


if TYPE_CHECKING:
    from rich.console import Console

    from healthreport.core.models import HealthcareReport, ReportSection
    from healthreport.reports.queries import QueryDefinition
    from healthreport.tools.sql import StatementCheck


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def print_section(console: Console, section: ReportSection, max_rows: int | None = None) -> None:
    """Print one query result as a table."""
    if not section.rows:
        console.print(f"  [yellow]⚠[/yellow] {section.title}: no rows")
        return
    table = Table(title=section.title, border_style="dim")
    for column in section.columns:
        numeric = all(isinstance(r.get(column), (int, float)) for r in section.rows)
        table.add_column(column.replace("_", " "), justify="right" if numeric else "left")
    rows = section.rows if max_rows is None else section.rows[:max_rows]
    for row in rows:
        table.add_row(*(_cell(row.get(c)) for c in section.columns))
    console.print(table)
    if max_rows is not None and len(section.rows) > max_rows:
        console.print(f"  [dim]... and {len(section.rows) - max_rows} more rows[/dim]")


def print_report_summary(console: Console, report: HealthcareReport) -> None:
    """Print final report summary."""
    console.print()
    table = Table(title="Report Summary", border_style="blue")
    table.add_column("Query", style="bold")
    table.add_column("Rows", justify="right")
    for section in report.sections:
        table.add_row(section.title, str(len(section.rows)))
    table.add_row("Total", str(report.total_rows), style="bold")
    table.add_row("Query Time", f"{report.processing_time_seconds:.2f}s")
    console.print(table)


def print_catalog(console: Console, definitions: list[QueryDefinition]) -> None:
    """Print the query catalog."""
    table = Table(title="Query Catalog", border_style="blue")
    table.add_column("Name", style="cyan")
    table.add_column("Parameters", style="green")
    table.add_column("Description")
    for definition in definitions:
        table.add_row(definition.name, ", ".join(definition.params), definition.description)
    console.print(table)


def print_checks(console: Console, checks: list[StatementCheck]) -> None:
    """Print catalog validation results."""
    table = Table(title="Catalog Check", border_style="blue")
    table.add_column("Statement")
    table.add_column("Status", justify="center")
    table.add_column("Tables", style="dim")
    table.add_column("Notes")
    for check in checks:
        status = "[green]✓[/green]" if check.ok else "[red]✗[/red]"
        notes = check.error or "; ".join(check.warnings)
        table.add_row(check.name, status, ", ".join(check.tables_used), notes)
    console.print(table)
    failed = sum(1 for c in checks if not c.ok)
    if failed:
        console.print(Panel(f"[red]{failed} statement(s) failed[/red]", border_style="red"))


def print_db_stats(console: Console, db_path: str, stats: dict[str, int]) -> None:
    """Print database statistics."""
    table = Table(title=f"Store Statistics ({db_path})", border_style="blue")
    table.add_column("Table", style="bold")
    table.add_column("Rows", justify="right")
    for name, count in stats.items():
        table.add_row(name, str(count))
    console.print()
    console.print(table)


def print_sql(console: Console, name: str, sql: str) -> None:
    """Print one formatted catalog statement."""
    console.print(Panel(Syntax(sql, "sql", word_wrap=True), title=name, border_style="dim"))

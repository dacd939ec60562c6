"""Console output and logging setup for the CLI."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from healthreport.console.display import (
    print_catalog,
    print_checks,
    print_db_stats,
    print_report_summary,
    print_section,
    print_sql,
)


if TYPE_CHECKING:
    from collections.abc import Iterator

    from healthreport.core.models import HealthcareReport, ReportSection
    from healthreport.reports.queries import QueryDefinition
    from healthreport.tools.sql import StatementCheck


class ReportConsole:
    """Rich console interface for report progress and results."""

    def __init__(self, verbose: bool = False, console: Console | None = None) -> None:
        self.console = console or Console()
        self.verbose = verbose

    def setup_logging(self, level: str = "INFO") -> None:
        logging.basicConfig(
            level=level if self.verbose else "WARNING",
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, db_path: str, reference_date: str | None = None) -> None:
        header = Text()
        header.append("healthreport", style="bold blue")
        header.append(" - Healthcare Reporting\n\n", style="dim")
        header.append("Store: ", style="bold")
        header.append(str(db_path), style="green")
        if reference_date:
            header.append("\nReference date: ", style="bold")
            header.append(reference_date, style="dim")
        self.console.print(Panel(header, border_style="blue"))
        self.console.print()

    @contextmanager
    def report_progress(self, total: int) -> Iterator[Any]:
        """Progress bar advanced once per completed section."""
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            expand=False,
        )
        with progress:
            task = progress.add_task("Running queries...", total=total)

            def advance(section: ReportSection) -> None:
                progress.update(task, advance=1, description=section.title)

            yield advance

    def print_section(self, section: ReportSection, max_rows: int | None = None) -> None:
        print_section(self.console, section, max_rows)

    def print_report_summary(self, report: HealthcareReport) -> None:
        print_report_summary(self.console, report)

    def print_catalog(self, definitions: list[QueryDefinition]) -> None:
        print_catalog(self.console, definitions)

    def print_sql(self, name: str, sql: str) -> None:
        print_sql(self.console, name, sql)

    def print_checks(self, checks: list[StatementCheck]) -> None:
        print_checks(self.console, checks)

    def print_db_stats(self, db_path: str, stats: dict[str, int]) -> None:
        print_db_stats(self.console, db_path, stats)

    def print_success(self, message: str, output_path: str | None = None) -> None:
        body = f"[green]✓ {message}[/green]"
        if output_path:
            body += f"\n\n[bold]Output:[/bold] {output_path}"
        self.console.print()
        self.console.print(Panel(body, title="[green]Complete[/green]", border_style="green"))

    def print_error(self, error: str) -> None:
        self.console.print()
        self.console.print(
            Panel(f"[red]{error}[/red]", title="[red]Error[/red]", border_style="red")
        )

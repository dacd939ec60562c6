"""Runs the whole catalog into one report."""

from __future__ import annotations

import logging
import time
from datetime import date, timedelta
from typing import TYPE_CHECKING, Any

from healthreport.config.settings import Settings
from healthreport.core.models import HealthcareReport, ReportSection
from healthreport.core.types import BillingStatus
from healthreport.reports.queries import CATALOG
from healthreport.tools.html import HTMLRenderer


if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from healthreport.reports.catalog import ReportingQueries

logger = logging.getLogger(__name__)

# Per-entity lookups have no sensible report-wide argument
LOOKUP_QUERIES = frozenset({
    "appointments_for_patient",
    "prescriptions_for_appointment",
    "billing_for_appointment",
    "appointments_for_doctor",
})


class ReportRunner:
    """Executes every report-wide catalog query for one reference date."""

    def __init__(self, queries: ReportingQueries, settings: Settings | None = None) -> None:
        if settings is None:
            settings = Settings()
        self.settings = settings
        self._queries = queries

    def default_params(self, reference_date: date) -> dict[str, dict[str, Any]]:
        """Arguments for the parameterized queries, derived from settings."""
        window = self.settings.reports.recent_window_days
        return {
            "billings_by_status": {"status": BillingStatus.PAID.value},
            "patients_with_recent_appointments": {
                "window_days": window,
                "reference_date": reference_date,
            },
            "top_patients_by_total_billed": {"limit": self.settings.reports.top_patients_limit},
            "medication_frequency_and_dosage": {"policy": self.settings.reports.dosage_policy},
            "patients_with_appointments_in_month": {
                "year": reference_date.year,
                "month": reference_date.month,
            },
            "doctor_schedule": {
                "start_date": reference_date - timedelta(days=window),
                "end_date": reference_date,
            },
        }

    def build(
        self,
        database: str,
        reference_date: date | None = None,
        on_section: Callable[[ReportSection], None] | None = None,
    ) -> HealthcareReport:
        """Run the catalog and collect one section per query.

        Any query failure propagates; a report is never built from a
        partial catalog.
        """
        start_time = time.time()
        reference_date = reference_date or date.today()
        params = self.default_params(reference_date)
        sections: list[ReportSection] = []

        for name, definition in CATALOG.items():
            if name in LOOKUP_QUERIES:
                continue
            rows = self._queries.run(name, **params.get(name, {}))
            section = ReportSection.from_rows(name, definition.title, definition.row_type, rows)
            sections.append(section)
            logger.info("%s: %d rows", name, len(rows))
            if on_section:
                on_section(section)

        return HealthcareReport(
            database=database,
            reference_date=reference_date,
            sections=sections,
            processing_time_seconds=time.time() - start_time,
        )

    def write_html(self, report: HealthcareReport, output_path: str | Path) -> Path:
        return HTMLRenderer().write(report.to_template_data(), output_path)


"""Reporting query layer."""

from __future__ import annotations

from healthreport.reports.catalog import ReportingQueries
from healthreport.reports.queries import CATALOG, QueryDefinition
from healthreport.reports.runner import ReportRunner


__all__ = ["CATALOG", "QueryDefinition", "ReportRunner", "ReportingQueries"]

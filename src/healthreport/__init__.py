"""healthreport - Read-only reporting over a healthcare store.

This package provides a catalog of analytical queries over a five-table
clinic schema (patients, doctors, appointments, billing, prescriptions):
- Typed, immutable result rows
- Parameter validation and a two-kind error taxonomy
- An HTML report of the whole catalog
- A sqlglot check of every statement against the schema
"""

from __future__ import annotations

from healthreport.config.settings import Settings
from healthreport.core.errors import (
    DataAccessError,
    DataQualityError,
    ReportingError,
    ValidationError,
)
from healthreport.core.types import BillingStatus, DosagePolicy
from healthreport.reports.catalog import ReportingQueries
from healthreport.reports.runner import ReportRunner
from healthreport.storage.database import HealthcareDatabase


__version__ = "0.1.0"

__all__ = [
    "BillingStatus",
    "DataAccessError",
    "DataQualityError",
    "DosagePolicy",
    "HealthcareDatabase",
    "ReportRunner",
    "ReportingError",
    "ReportingQueries",
    "Settings",
    "ValidationError",
]

"""Core module - shared models, types and errors."""

from __future__ import annotations

from healthreport.core.errors import (
    DataAccessError,
    DataQualityError,
    ReportingError,
    ValidationError,
)
from healthreport.core.models import (
    Appointment,
    Billing,
    BillingSummary,
    Dataset,
    Doctor,
    HealthcareReport,
    MedicationUsage,
    Patient,
    Prescription,
    ReportSection,
    Row,
)
from healthreport.core.types import BillingStatus, DosagePolicy
from healthreport.core.utils import parse_dosage, to_money


__all__ = [
    # Entities
    "Appointment",
    "Billing",
    # Types
    "BillingStatus",
    # Report rows
    "BillingSummary",
    # Errors
    "DataAccessError",
    "DataQualityError",
    "Dataset",
    "Doctor",
    "DosagePolicy",
    "HealthcareReport",
    "MedicationUsage",
    "Patient",
    "Prescription",
    "ReportSection",
    "ReportingError",
    "Row",
    "ValidationError",
    # Utils
    "parse_dosage",
    "to_money",
]

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from healthreport.core.models import (
    Appointment,
    Billing,
    Dataset,
    Doctor,
    Patient,
    Prescription,
)
from healthreport.core.types import DosagePolicy
from healthreport.reports.catalog import ReportingQueries
from healthreport.storage.database import HealthcareDatabase
from healthreport.storage.sample_data import SAMPLE_DATASET


if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def make_db(tmp_path: Path) -> Callable[..., HealthcareDatabase]:
    """Factory for initialized stores, optionally loaded with a dataset."""
    counter = iter(range(1000))

    def _make(dataset: Dataset | None = None, **kwargs: object) -> HealthcareDatabase:
        db = HealthcareDatabase(tmp_path / f"store_{next(counter)}.db", **kwargs)
        db.initialize()
        if dataset is not None:
            db.load_dataset(dataset)
        return db

    return _make


@pytest.fixture
def empty_db(make_db: Callable[..., HealthcareDatabase]) -> HealthcareDatabase:
    """Store with the schema and no rows."""
    return make_db()


@pytest.fixture
def sample_db(make_db: Callable[..., HealthcareDatabase]) -> HealthcareDatabase:
    """Store loaded with the bundled sample dataset."""
    return make_db(SAMPLE_DATASET)


@pytest.fixture
def queries(sample_db: HealthcareDatabase) -> ReportingQueries:
    return ReportingQueries(sample_db, DosagePolicy.ZERO)


@pytest.fixture
def scenario_dataset() -> Dataset:
    """One patient, doctor, appointment, paid bill and prescription."""
    return Dataset(
        patients=[
            Patient(patient_id=1, first_name="Pat", last_name="One",
                    dob=date(1980, 1, 1), gender="Female"),
        ],
        doctors=[
            Doctor(doctor_id=1, first_name="Doc", last_name="One", specialty="General Practice"),
        ],
        appointments=[
            Appointment(appointment_id=1, patient_id=1, doctor_id=1,
                        appointment_date=date(2024, 8, 5), reason="Sore throat"),
        ],
        billing=[
            Billing(billing_id=1, appointment_id=1, amount=Decimal("100.00"), status="paid",
                    payment_date=date(2024, 8, 6)),
        ],
        prescriptions=[
            Prescription(prescription_id=1, appointment_id=1, medication="Amoxicillin",
                         dosage="500 mg", instructions="Three times daily"),
        ],
    )

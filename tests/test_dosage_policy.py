"""Tests for the malformed-dosage policies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from healthreport.core.errors import DataQualityError, ValidationError
from healthreport.core.models import Prescription
from healthreport.core.types import DosagePolicy
from healthreport.reports.catalog import ReportingQueries


if TYPE_CHECKING:
    from collections.abc import Callable

    from healthreport.core.models import Dataset
    from healthreport.storage.database import HealthcareDatabase


def _usage(queries: ReportingQueries, policy: DosagePolicy | str | None = None) -> dict:
    return {
        r.medication: (r.frequency, r.total_dosage)
        for r in queries.medication_frequency_and_dosage(policy)
    }


def test_zero_policy_counts_malformed_rows_as_zero(queries: ReportingQueries) -> None:
    usage = _usage(queries, DosagePolicy.ZERO)
    assert usage["Ibuprofen"] == (1, 0)
    assert usage["Atorvastatin"] == (2, 60)
    assert usage["Hydrocortisone"] == (1, 1)


def test_zero_policy_ordering(queries: ReportingQueries) -> None:
    rows = queries.medication_frequency_and_dosage()
    assert [r.medication for r in rows] == [
        "Atorvastatin",
        "Amoxicillin",
        "Aspirin",
        "Doxycycline",
        "Hydrocortisone",
        "Ibuprofen",
        "Lisinopril",
    ]


def test_skip_policy_drops_malformed_rows(queries: ReportingQueries) -> None:
    usage = _usage(queries, "skip")
    assert "Ibuprofen" not in usage
    assert usage["Atorvastatin"] == (2, 60)
    assert usage["Amoxicillin"] == (1, 500)


def test_strict_policy_fails_the_whole_query(queries: ReportingQueries) -> None:
    with pytest.raises(DataQualityError) as exc_info:
        queries.medication_frequency_and_dosage(DosagePolicy.STRICT)
    assert exc_info.value.row_ids == [8]


def test_strict_policy_passes_on_clean_data(empty_db: HealthcareDatabase) -> None:
    queries = ReportingQueries(empty_db, DosagePolicy.STRICT)
    assert queries.medication_frequency_and_dosage() == []


def test_layer_default_policy_applies(sample_db: HealthcareDatabase) -> None:
    queries = ReportingQueries(sample_db, DosagePolicy.SKIP)
    assert "Ibuprofen" not in _usage(queries)
    assert "Ibuprofen" in _usage(queries, DosagePolicy.ZERO)


def test_unknown_policy_is_rejected(queries: ReportingQueries) -> None:
    with pytest.raises(ValidationError, match="dosage policy"):
        queries.medication_frequency_and_dosage("lenient")


@pytest.fixture
def oversized_dosage_db(
    make_db: Callable[..., HealthcareDatabase], scenario_dataset: Dataset
) -> HealthcareDatabase:
    oversized = Prescription(
        prescription_id=2, appointment_id=1, medication="Amoxicillin",
        dosage="99999999999999999999 mg",
    )
    return make_db(scenario_dataset.model_copy(
        update={"prescriptions": [*scenario_dataset.prescriptions, oversized]}
    ))


def test_oversized_dosage_counts_as_malformed(oversized_dosage_db: HealthcareDatabase) -> None:
    queries = ReportingQueries(oversized_dosage_db)
    assert _usage(queries, DosagePolicy.ZERO) == {"Amoxicillin": (2, 500)}
    assert _usage(queries, DosagePolicy.SKIP) == {"Amoxicillin": (1, 500)}
    with pytest.raises(DataQualityError) as exc_info:
        queries.medication_frequency_and_dosage(DosagePolicy.STRICT)
    assert exc_info.value.row_ids == [2]


def test_empty_policy_is_rejected(queries: ReportingQueries) -> None:
    with pytest.raises(ValidationError, match="dosage policy"):
        queries.medication_frequency_and_dosage("")

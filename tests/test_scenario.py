"""Single-visit scenario and structural properties of the catalog."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from healthreport.core.models import (
    Appointment,
    Billing,
    BillingSummary,
    Dataset,
    Doctor,
    MedicationUsage,
    Patient,
    Prescription,
)
from healthreport.reports.catalog import ReportingQueries
from healthreport.storage.sample_data import SAMPLE_DATASET


if TYPE_CHECKING:
    from collections.abc import Callable

    from healthreport.storage.database import HealthcareDatabase


def test_single_paid_visit(
    make_db: Callable[..., HealthcareDatabase], scenario_dataset: Dataset
) -> None:
    queries = ReportingQueries(make_db(scenario_dataset))

    (appointment,) = queries.appointments_for_patient(1)
    assert appointment == scenario_dataset.appointments[0]
    assert queries.billing_summary() == BillingSummary(
        total_billed=Decimal("100.00"), total_paid=Decimal("100.00")
    )
    assert queries.medication_frequency_and_dosage() == [
        MedicationUsage(medication="Amoxicillin", frequency=1, total_dosage=500)
    ]
    assert queries.patients_with_pending_balance() == []


def test_empty_store_returns_empty_results_and_zero_totals(
    empty_db: HealthcareDatabase,
) -> None:
    queries = ReportingQueries(empty_db)
    summary = queries.billing_summary()
    assert summary.total_billed == Decimal("0")
    assert summary.total_paid == Decimal("0")
    assert queries.appointments_with_billing_status() == []
    assert queries.medication_frequency_and_dosage() == []
    assert queries.monthly_appointment_trend() == []
    assert queries.top_patients_by_total_billed(5) == []


def test_billing_summary_without_billing_rows(
    make_db: Callable[..., HealthcareDatabase],
) -> None:
    unbilled = SAMPLE_DATASET.model_copy(update={"billing": []})
    queries = ReportingQueries(make_db(unbilled))
    assert queries.billing_summary() == BillingSummary(
        total_billed=Decimal("0.00"), total_paid=Decimal("0.00")
    )
    assert len(queries.unbilled_appointments()) == len(SAMPLE_DATASET.appointments)


def test_inner_join_cardinality_ignores_insertion_order(
    make_db: Callable[..., HealthcareDatabase],
) -> None:
    reversed_dataset = Dataset(
        patients=list(reversed(SAMPLE_DATASET.patients)),
        doctors=list(reversed(SAMPLE_DATASET.doctors)),
        appointments=list(reversed(SAMPLE_DATASET.appointments)),
        billing=list(reversed(SAMPLE_DATASET.billing)),
        prescriptions=list(reversed(SAMPLE_DATASET.prescriptions)),
    )
    forward = ReportingQueries(make_db(SAMPLE_DATASET))
    backward = ReportingQueries(make_db(reversed_dataset))

    billed = {b.appointment_id for b in SAMPLE_DATASET.billing}
    assert len(forward.appointments_with_billing_status()) == len(billed)
    assert backward.appointments_with_billing_status() == forward.appointments_with_billing_status()
    assert backward.top_patients_by_total_billed(10) == forward.top_patients_by_total_billed(10)


def test_paid_never_exceeds_billed(make_db: Callable[..., HealthcareDatabase]) -> None:
    start = date(2024, 1, 1)
    statuses = ["paid", "pending", "overdue", "PAID", "cancelled"]
    dataset = Dataset(
        patients=[Patient(patient_id=1, first_name="A", last_name="B")],
        doctors=[Doctor(doctor_id=1, first_name="C", last_name="D", specialty="Oncology")],
        appointments=[
            Appointment(appointment_id=i, patient_id=1, doctor_id=1,
                        appointment_date=start + timedelta(days=i))
            for i in range(1, 21)
        ],
        billing=[
            Billing(billing_id=i, appointment_id=i, amount=Decimal(i * 17) / 4,
                    status=statuses[i % len(statuses)])
            for i in range(1, 21)
        ],
    )
    summary = ReportingQueries(make_db(dataset)).billing_summary()
    expected_paid = sum(
        (Decimal(i * 17) / 4 for i in range(1, 21) if statuses[i % len(statuses)].lower() == "paid"),
        Decimal("0"),
    )
    assert summary.total_paid == expected_paid.quantize(Decimal("0.01"))
    assert Decimal("0") <= summary.total_paid <= summary.total_billed


def test_medication_frequency_matches_exact_strings(
    make_db: Callable[..., HealthcareDatabase], scenario_dataset: Dataset
) -> None:
    extra = [
        Prescription(prescription_id=2, appointment_id=1, medication="Amoxicillin",
                     dosage="250 mg"),
        Prescription(prescription_id=3, appointment_id=1, medication="amoxicillin",
                     dosage="125mg"),
    ]
    dataset = scenario_dataset.model_copy(
        update={"prescriptions": scenario_dataset.prescriptions + extra}
    )
    rows = ReportingQueries(make_db(dataset)).medication_frequency_and_dosage()
    assert rows == [
        MedicationUsage(medication="Amoxicillin", frequency=2, total_dosage=750),
        MedicationUsage(medication="amoxicillin", frequency=1, total_dosage=125),
    ]


def test_equal_totals_from_different_sums_tie_on_id(
    make_db: Callable[..., HealthcareDatabase],
) -> None:
    dataset = Dataset(
        patients=[
            Patient(patient_id=1, first_name="Ann", last_name="Lee"),
            Patient(patient_id=2, first_name="Bo", last_name="Kim"),
        ],
        doctors=[
            Doctor(doctor_id=1, first_name="C", last_name="Ray", specialty="Oncology"),
            Doctor(doctor_id=2, first_name="D", last_name="Fox", specialty="Oncology"),
        ],
        appointments=[
            Appointment(appointment_id=1, patient_id=1, doctor_id=1,
                        appointment_date=date(2024, 3, 1)),
            Appointment(appointment_id=2, patient_id=2, doctor_id=2,
                        appointment_date=date(2024, 3, 2)),
            Appointment(appointment_id=3, patient_id=2, doctor_id=2,
                        appointment_date=date(2024, 3, 3)),
        ],
        billing=[
            Billing(billing_id=1, appointment_id=1, amount=Decimal("0.30"), status="pending"),
            Billing(billing_id=2, appointment_id=2, amount=Decimal("0.10"), status="pending"),
            Billing(billing_id=3, appointment_id=3, amount=Decimal("0.20"), status="pending"),
        ],
    )
    queries = ReportingQueries(make_db(dataset))

    top = queries.top_patients_by_total_billed(5)
    assert [(r.patient_id, r.total_amount) for r in top] == [
        (1, Decimal("0.30")),
        (2, Decimal("0.30")),
    ]
    assert [r.patient_id for r in queries.patients_with_pending_balance()] == [1, 2]
    assert [r.doctor_id for r in queries.doctor_revenue_report()] == [1, 2]
    assert queries.billing_summary().total_billed == Decimal("0.60")

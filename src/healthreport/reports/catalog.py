"""Reporting query layer over the healthcare store."""

from __future__ import annotations

import calendar
import inspect
import logging
from datetime import date, timedelta
from typing import TYPE_CHECKING, Any

from healthreport.core.errors import DataQualityError, ValidationError
from healthreport.core.models import (
    Appointment,
    AppointmentBillingRow,
    Billing,
    BillingSummary,
    DailyCount,
    DoctorAppointment,
    DoctorAppointmentCount,
    DoctorRevenue,
    DoctorScheduleEntry,
    GenderCount,
    MedicationUsage,
    Patient,
    PatientAmount,
    PatientBillingAverage,
    PatientLatestAppointment,
    PatientName,
    PatientVisit,
    PaymentStatusCount,
    PendingPrescription,
    PeriodCount,
    Prescription,
    ReasonCount,
    Row,
    SpecialtyCount,
    UnbilledAppointment,
)
from healthreport.core.types import BillingStatus, DosagePolicy
from healthreport.core.utils import coerce_date, require_id, require_int
from healthreport.reports import queries as q
from healthreport.storage.converters import rows_to_models


if TYPE_CHECKING:
    from healthreport.core.types import SQLParams
    from healthreport.reports.queries import QueryDefinition
    from healthreport.storage.database import HealthcareDatabase

logger = logging.getLogger(__name__)


class ReportingQueries:
    """Stateless catalog of read-only analytical queries.

    Each public method validates its parameters, issues exactly one read
    statement (two for the strict dosage policy) and returns a fully
    materialized list of immutable rows. Nothing is cached between calls.
    """

    def __init__(
        self,
        db: HealthcareDatabase,
        dosage_policy: DosagePolicy = DosagePolicy.ZERO,
    ) -> None:
        self._db = db
        self.dosage_policy = dosage_policy

    def _fetch(self, query: QueryDefinition, params: SQLParams | None = None) -> list[Any]:
        rows = self._db.fetch_all(query.sql, params, name=query.name)
        return rows_to_models(rows, query.row_type)

    @staticmethod
    def catalog() -> list[QueryDefinition]:
        return list(q.CATALOG.values())

    def run(self, name: str, **params: Any) -> list[Any]:
        """Run a catalog query by name.

        Raises:
            ValidationError: Unknown query name or parameters that do not
                match the query's signature.
        """
        if name not in q.CATALOG:
            raise ValidationError("query", f"unknown query {name!r}")
        method = getattr(self, name)
        try:
            inspect.signature(method).bind(**params)
        except TypeError as e:
            raise ValidationError("parameters", f"{name}: {e}") from e
        result = method(**params)
        return [result] if isinstance(result, Row) else result

    # Lookups

    def appointments_for_patient(self, patient_id: int) -> list[Appointment]:
        patient_id = require_id("patient_id", patient_id)
        return self._fetch(q.APPOINTMENTS_FOR_PATIENT, {"patient_id": patient_id})

    def prescriptions_for_appointment(self, appointment_id: int) -> list[Prescription]:
        appointment_id = require_id("appointment_id", appointment_id)
        return self._fetch(
            q.PRESCRIPTIONS_FOR_APPOINTMENT, {"appointment_id": appointment_id}
        )

    def billing_for_appointment(self, appointment_id: int) -> list[Billing]:
        appointment_id = require_id("appointment_id", appointment_id)
        return self._fetch(q.BILLING_FOR_APPOINTMENT, {"appointment_id": appointment_id})

    def billings_by_status(self, status: str) -> list[Billing]:
        if not isinstance(status, str) or not status.strip():
            raise ValidationError("status", "must be a non-empty string")
        return self._fetch(q.BILLINGS_BY_STATUS, {"status": status.strip()})

    def appointments_for_doctor(self, doctor_id: int) -> list[DoctorAppointment]:
        doctor_id = require_id("doctor_id", doctor_id)
        return self._fetch(q.APPOINTMENTS_FOR_DOCTOR, {"doctor_id": doctor_id})

    # Billing

    def billing_summary(self) -> BillingSummary:
        """Total billed and total paid; both zero when there is no billing."""
        return self._fetch(q.BILLING_SUMMARY, {"paid_status": BillingStatus.PAID.value})[0]

    def appointments_with_billing_status(self) -> list[AppointmentBillingRow]:
        return self._fetch(q.APPOINTMENTS_WITH_BILLING_STATUS)

    def unbilled_appointments(self) -> list[UnbilledAppointment]:
        return self._fetch(q.UNBILLED_APPOINTMENTS)

    def patients_with_pending_balance(self) -> list[PatientAmount]:
        return self._fetch(
            q.PATIENTS_WITH_PENDING_BALANCE, {"pending_status": BillingStatus.PENDING.value}
        )

    def top_patients_by_total_billed(self, limit: int = 10) -> list[PatientAmount]:
        limit = require_int("limit", limit)
        return self._fetch(q.TOP_PATIENTS_BY_TOTAL_BILLED, {"row_limit": limit})

    def doctor_revenue_report(self) -> list[DoctorRevenue]:
        return self._fetch(q.DOCTOR_REVENUE_REPORT)

    def prescriptions_with_pending_billing(self) -> list[PendingPrescription]:
        return self._fetch(
            q.PRESCRIPTIONS_WITH_PENDING_BILLING, {"pending_status": BillingStatus.PENDING.value}
        )

    def payment_status_trend(self) -> list[PaymentStatusCount]:
        return self._fetch(q.PAYMENT_STATUS_TREND)

    def average_billing_per_patient(self) -> list[PatientBillingAverage]:
        return self._fetch(q.AVERAGE_BILLING_PER_PATIENT)

    # Appointment statistics

    def appointment_count_by_specialty(self) -> list[SpecialtyCount]:
        """Counts per specialty; doctors without appointments are left out."""
        return self._fetch(q.APPOINTMENT_COUNT_BY_SPECIALTY)

    def appointment_count_by_specialty_all_doctors(self) -> list[SpecialtyCount]:
        """Counts per specialty; idle specialties appear with a count of 0."""
        return self._fetch(q.APPOINTMENT_COUNT_BY_SPECIALTY_ALL_DOCTORS)

    def appointment_reasons(self) -> list[ReasonCount]:
        return self._fetch(q.APPOINTMENT_REASONS)

    def doctor_appointment_counts(self) -> list[DoctorAppointmentCount]:
        return self._fetch(q.DOCTOR_APPOINTMENT_COUNTS)

    def monthly_appointment_trend(self) -> list[PeriodCount]:
        return self._fetch(q.MONTHLY_APPOINTMENT_TREND)

    def yearly_appointment_trend(self) -> list[PeriodCount]:
        return self._fetch(q.YEARLY_APPOINTMENT_TREND)

    def daily_appointment_counts(self) -> list[DailyCount]:
        return self._fetch(q.DAILY_APPOINTMENT_COUNTS)

    # Patients

    def latest_appointment_per_patient(self) -> list[PatientLatestAppointment]:
        return self._fetch(q.LATEST_APPOINTMENT_PER_PATIENT)

    def patient_gender_distribution(self) -> list[GenderCount]:
        return self._fetch(q.PATIENT_GENDER_DISTRIBUTION)

    def patients_without_appointments(self) -> list[PatientName]:
        return self._fetch(q.PATIENTS_WITHOUT_APPOINTMENTS)

    def patients_with_recent_appointments(
        self, window_days: int = 30, reference_date: date | str | None = None
    ) -> list[Patient]:
        """Distinct patients with an appointment since ``window_days`` before the reference date.

        The window has no upper bound, so appointments booked after the
        reference date count too. Without a reference date the current date
        is read once, here, and bound into the statement.
        """
        window_days = require_int("window_days", window_days)
        if reference_date is None:
            reference_date = date.today()
        ref = coerce_date("reference_date", reference_date)
        try:
            window_start = ref - timedelta(days=window_days)
        except OverflowError as e:
            raise ValidationError("window_days", f"{window_days} reaches before year 1") from e
        return self._fetch(
            q.PATIENTS_WITH_RECENT_APPOINTMENTS, {"window_start": window_start.isoformat()}
        )

    def patients_with_appointments_in_month(self, year: int, month: int) -> list[PatientVisit]:
        year = require_int("year", year, minimum=1, maximum=9999)
        month = require_int("month", month, minimum=1, maximum=12)
        month_start = date(year, month, 1)
        month_end = date(year, month, calendar.monthrange(year, month)[1])
        return self._fetch(
            q.PATIENTS_WITH_APPOINTMENTS_IN_MONTH,
            {"month_start": month_start.isoformat(), "month_end": month_end.isoformat()},
        )

    def doctor_schedule(
        self, start_date: date | str, end_date: date | str
    ) -> list[DoctorScheduleEntry]:
        start = coerce_date("start_date", start_date)
        end = coerce_date("end_date", end_date)
        if start > end:
            raise ValidationError("start_date", f"{start} is after end_date {end}")
        return self._fetch(
            q.DOCTOR_SCHEDULE,
            {"start_date": start.isoformat(), "end_date": end.isoformat()},
        )

    # Prescriptions

    def medication_frequency_and_dosage(
        self, policy: DosagePolicy | str | None = None
    ) -> list[MedicationUsage]:
        """Per medication, prescription count and summed leading dosage number.

        Args:
            policy: What to do with dosages that have no leading number.
                Defaults to the layer's configured policy.

        Raises:
            DataQualityError: ``strict`` policy and at least one malformed
                dosage in the store.
        """
        try:
            policy = DosagePolicy(self.dosage_policy if policy is None else policy)
        except ValueError as e:
            raise ValidationError("policy", f"unknown dosage policy {policy!r}") from e

        if policy is DosagePolicy.SKIP:
            return self._fetch(q.MEDICATION_FREQUENCY_SKIPPING_MALFORMED)
        if policy is DosagePolicy.STRICT:
            malformed = self._fetch(q.MALFORMED_DOSAGES)
            if malformed:
                ids = [r.prescription_id for r in malformed]
                logger.warning("%d prescriptions have malformed dosages", len(ids))
                raise DataQualityError(
                    f"Dosage without a leading number in prescriptions {ids}", row_ids=ids
                )
        return self._fetch(q.MEDICATION_FREQUENCY_AND_DOSAGE)

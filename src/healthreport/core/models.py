"""Data models for the healthcare reporting layer."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from healthreport.core.utils import to_money


Money = Annotated[Decimal, BeforeValidator(to_money)]


class Row(BaseModel):
    """Base for every immutable row returned by the store."""

    model_config = ConfigDict(frozen=True)


# Entities


class Patient(Row):
    patient_id: int
    first_name: str
    last_name: str
    dob: date | None = None
    gender: str | None = None
    contact_number: str | None = None
    address: str | None = None


class Doctor(Row):
    doctor_id: int
    first_name: str
    last_name: str
    specialty: str
    contact_number: str | None = None


class Appointment(Row):
    appointment_id: int
    patient_id: int
    doctor_id: int
    appointment_date: date
    reason: str | None = None


class Billing(Row):
    billing_id: int
    appointment_id: int
    amount: Money = Field(ge=0)
    status: str
    payment_date: date | None = None


class Prescription(Row):
    prescription_id: int
    appointment_id: int
    medication: str
    dosage: str | None = None
    instructions: str | None = None


class Dataset(BaseModel):
    """A full set of rows to load into an empty store."""

    patients: list[Patient] = Field(default_factory=list)
    doctors: list[Doctor] = Field(default_factory=list)
    appointments: list[Appointment] = Field(default_factory=list)
    billing: list[Billing] = Field(default_factory=list)
    prescriptions: list[Prescription] = Field(default_factory=list)


# Report rows


class BillingSummary(Row):
    """Totals over every billing row."""
    total_billed: Money = Decimal("0.00")
    total_paid: Money = Decimal("0.00")


class AppointmentBillingRow(Row):
    appointment_id: int
    patient_first_name: str
    patient_last_name: str
    doctor_first_name: str
    doctor_last_name: str
    amount: Money
    payment_date: date | None = None
    status: str


class UnbilledAppointment(Row):
    appointment_id: int
    patient_id: int
    doctor_id: int
    appointment_date: date


class SpecialtyCount(Row):
    specialty: str
    appointment_count: int


class DoctorAppointmentCount(Row):
    doctor_id: int
    first_name: str
    last_name: str
    appointment_count: int


class MedicationUsage(Row):
    medication: str
    frequency: int
    total_dosage: int


class PeriodCount(Row):
    """Appointment count for one calendar bucket (``YYYY`` or ``YYYY-MM``)."""
    period: str
    appointment_count: int


class DailyCount(Row):
    appointment_date: date
    appointment_count: int


class ReasonCount(Row):
    reason: str | None
    appointment_count: int


class GenderCount(Row):
    gender: str | None
    patient_count: int


class PaymentStatusCount(Row):
    payment_month: str | None
    status: str
    billing_count: int


class PatientName(Row):
    patient_id: int
    first_name: str
    last_name: str


class PatientLatestAppointment(PatientName):
    latest_appointment: date


class PatientAmount(PatientName):
    """A per-patient billing total (pending balance or total billed)."""
    total_amount: Money


class PatientBillingAverage(Row):
    patient_id: int
    appointment_count: int
    avg_billing_amount: Money | None = None


class DoctorRevenue(Row):
    doctor_id: int
    first_name: str
    last_name: str
    specialty: str
    total_billed: Money


class PendingPrescription(Row):
    prescription_id: int
    medication: str
    dosage: str | None = None
    instructions: str | None = None
    amount: Money
    payment_date: date | None = None
    status: str


class DoctorAppointment(Row):
    appointment_id: int
    patient_first_name: str
    patient_last_name: str
    appointment_date: date
    reason: str | None = None


class PatientVisit(Row):
    patient_id: int
    first_name: str
    last_name: str
    dob: date | None = None
    gender: str | None = None
    appointment_date: date


class DoctorScheduleEntry(Row):
    appointment_id: int
    doctor_first_name: str
    doctor_last_name: str
    appointment_date: date
    patient_first_name: str
    patient_last_name: str


# Rendered reports


class ReportSection(BaseModel):
    """One executed catalog query, ready for display."""
    name: str
    title: str
    columns: list[str] = Field(default_factory=list)
    rows: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_rows(
        cls, name: str, title: str, row_type: type[Row], rows: list[Row]
    ) -> ReportSection:
        return cls(
            name=name,
            title=title,
            columns=list(row_type.model_fields),
            rows=[row.model_dump(mode="json") for row in rows],
        )


class HealthcareReport(BaseModel):
    """Every catalog section for one reference date."""
    database: str
    reference_date: date
    generated_at: datetime = Field(default_factory=datetime.now)
    sections: list[ReportSection] = Field(default_factory=list)
    processing_time_seconds: float = 0.0

    @property
    def total_rows(self) -> int:
        return sum(len(s.rows) for s in self.sections)

    def to_template_data(self) -> dict[str, Any]:
        """Convert to data for HTML template."""
        return {
            "database": self.database,
            "reference_date": self.reference_date.isoformat(),
            "generated_at": self.generated_at.strftime("%Y-%m-%d %H:%M:%S"),
            "processing_time": f"{self.processing_time_seconds:.2f}s",
            "total_rows": self.total_rows,
            "sections": [
                {
                    "name": s.name,
                    "title": s.title,
                    "columns": s.columns,
                    "rows": s.rows,
                }
                for s in self.sections
            ],
        }

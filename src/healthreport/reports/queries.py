"""Catalog of analytical read statements over the healthcare schema.

Every statement is a single read with named placeholders. Statements that
can return several rows end in a total ORDER BY so that re-running them
against an unchanged store yields the same rows in the same order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

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


class QueryDefinition(BaseModel):
    """A named catalog statement and the parameters callers supply."""

    model_config = ConfigDict(frozen=True)

    name: str
    row_type: type[Row]
    title: str
    description: str
    sql: str
    params: tuple[str, ...] = ()


APPOINTMENTS_FOR_PATIENT = QueryDefinition(
    name="appointments_for_patient",
    row_type=Appointment,
    title="Appointments for patient",
    description="All appointments of one patient.",
    params=("patient_id",),
    sql="""
SELECT appointment_id, patient_id, doctor_id, appointment_date, reason
FROM appointments
WHERE patient_id = :patient_id
ORDER BY appointment_date, appointment_id
""",
)

PRESCRIPTIONS_FOR_APPOINTMENT = QueryDefinition(
    name="prescriptions_for_appointment",
    row_type=Prescription,
    title="Prescriptions for appointment",
    description="All prescriptions written during one appointment.",
    params=("appointment_id",),
    sql="""
SELECT prescription_id, appointment_id, medication, dosage, instructions
FROM prescriptions
WHERE appointment_id = :appointment_id
ORDER BY prescription_id
""",
)

BILLING_FOR_APPOINTMENT = QueryDefinition(
    name="billing_for_appointment",
    row_type=Billing,
    title="Billing for appointment",
    description="The billing row of one appointment, if any.",
    params=("appointment_id",),
    sql="""
SELECT billing_id, appointment_id, amount, status, payment_date
FROM billing
WHERE appointment_id = :appointment_id
ORDER BY billing_id
""",
)

BILLINGS_BY_STATUS = QueryDefinition(
    name="billings_by_status",
    row_type=Billing,
    title="Billing by status",
    description="Billing rows with one status, compared case-insensitively.",
    params=("status",),
    sql="""
SELECT billing_id, appointment_id, amount, status, payment_date
FROM billing
WHERE LOWER(status) = LOWER(:status)
ORDER BY billing_id
""",
)

BILLING_SUMMARY = QueryDefinition(
    name="billing_summary",
    row_type=BillingSummary,
    title="Billing summary",
    description="Total billed and total paid over every billing row.",
    sql="""
SELECT
    ROUND(COALESCE(SUM(amount), 0), 2) AS total_billed,
    ROUND(COALESCE(SUM(CASE WHEN LOWER(status) = :paid_status THEN amount END), 0), 2)
        AS total_paid
FROM billing
""",
)

APPOINTMENTS_WITH_BILLING_STATUS = QueryDefinition(
    name="appointments_with_billing_status",
    row_type=AppointmentBillingRow,
    title="Appointments with billing status",
    description="Billed appointments with patient and doctor names.",
    sql="""
SELECT a.appointment_id,
    p.first_name AS patient_first_name, p.last_name AS patient_last_name,
    d.first_name AS doctor_first_name, d.last_name AS doctor_last_name,
    b.amount, b.payment_date, b.status
FROM appointments a
JOIN patients p ON a.patient_id = p.patient_id
JOIN doctors d ON a.doctor_id = d.doctor_id
JOIN billing b ON a.appointment_id = b.appointment_id
ORDER BY a.appointment_id
""",
)

UNBILLED_APPOINTMENTS = QueryDefinition(
    name="unbilled_appointments",
    row_type=UnbilledAppointment,
    title="Unbilled appointments",
    description="Appointments without a billing row.",
    sql="""
SELECT a.appointment_id, a.patient_id, a.doctor_id, a.appointment_date
FROM appointments a
LEFT JOIN billing b ON a.appointment_id = b.appointment_id
WHERE b.billing_id IS NULL
ORDER BY a.appointment_id
""",
)

APPOINTMENT_COUNT_BY_SPECIALTY = QueryDefinition(
    name="appointment_count_by_specialty",
    row_type=SpecialtyCount,
    title="Appointments by specialty",
    description="Appointment counts per specialty, only doctors with appointments.",
    sql="""
SELECT d.specialty, COUNT(a.appointment_id) AS appointment_count
FROM appointments a
JOIN doctors d ON a.doctor_id = d.doctor_id
GROUP BY d.specialty
ORDER BY d.specialty
""",
)

APPOINTMENT_COUNT_BY_SPECIALTY_ALL_DOCTORS = QueryDefinition(
    name="appointment_count_by_specialty_all_doctors",
    row_type=SpecialtyCount,
    title="Appointments by specialty (all doctors)",
    description="Appointment counts per specialty, zero for idle specialties.",
    sql="""
SELECT d.specialty, COUNT(a.appointment_id) AS appointment_count
FROM doctors d
LEFT JOIN appointments a ON d.doctor_id = a.doctor_id
GROUP BY d.specialty
ORDER BY d.specialty
""",
)

APPOINTMENT_REASONS = QueryDefinition(
    name="appointment_reasons",
    row_type=ReasonCount,
    title="Most common appointment reasons",
    description="Appointment counts per reason, most common first.",
    sql="""
SELECT reason, COUNT(*) AS appointment_count
FROM appointments
GROUP BY reason
ORDER BY appointment_count DESC, reason
""",
)

LATEST_APPOINTMENT_PER_PATIENT = QueryDefinition(
    name="latest_appointment_per_patient",
    row_type=PatientLatestAppointment,
    title="Latest appointment per patient",
    description="Most recent appointment date of every patient with appointments.",
    sql="""
SELECT p.patient_id, p.first_name, p.last_name,
    MAX(a.appointment_date) AS latest_appointment
FROM patients p
JOIN appointments a ON p.patient_id = a.patient_id
GROUP BY p.patient_id, p.first_name, p.last_name
ORDER BY p.patient_id
""",
)

DOCTOR_APPOINTMENT_COUNTS = QueryDefinition(
    name="doctor_appointment_counts",
    row_type=DoctorAppointmentCount,
    title="Appointments per doctor",
    description="Every doctor with their appointment count, zero included.",
    sql="""
SELECT d.doctor_id, d.first_name, d.last_name,
    COUNT(a.appointment_id) AS appointment_count
FROM doctors d
LEFT JOIN appointments a ON d.doctor_id = a.doctor_id
GROUP BY d.doctor_id, d.first_name, d.last_name
ORDER BY d.doctor_id
""",
)

PATIENTS_WITH_RECENT_APPOINTMENTS = QueryDefinition(
    name="patients_with_recent_appointments",
    row_type=Patient,
    title="Patients with an appointment on or after the reference date minus the window.",
    description="Patients with an appointment since the window start before the reference date.",
    params=("window_days", "reference_date"),
    sql="""
SELECT DISTINCT p.patient_id, p.first_name, p.last_name, p.dob, p.gender,
    p.contact_number, p.address
FROM patients p
JOIN appointments a ON p.patient_id = a.patient_id
WHERE a.appointment_date >= :window_start
ORDER BY p.patient_id
""",
)

PRESCRIPTIONS_WITH_PENDING_BILLING = QueryDefinition(
    name="prescriptions_with_pending_billing",
    row_type=PendingPrescription,
    title="Prescriptions with pending billing",
    description="Prescriptions whose appointment is billed and still pending.",
    sql="""
SELECT pr.prescription_id, pr.medication, pr.dosage, pr.instructions,
    b.amount, b.payment_date, b.status
FROM prescriptions pr
JOIN appointments a ON pr.appointment_id = a.appointment_id
JOIN billing b ON a.appointment_id = b.appointment_id
WHERE LOWER(b.status) = :pending_status
ORDER BY pr.prescription_id
""",
)

PATIENT_GENDER_DISTRIBUTION = QueryDefinition(
    name="patient_gender_distribution",
    row_type=GenderCount,
    title="Patient demographics",
    description="Patient counts per gender.",
    sql="""
SELECT gender, COUNT(*) AS patient_count
FROM patients
GROUP BY gender
ORDER BY patient_count DESC, gender
""",
)

MONTHLY_APPOINTMENT_TREND = QueryDefinition(
    name="monthly_appointment_trend",
    row_type=PeriodCount,
    title="Monthly appointment trend",
    description="Appointment counts per calendar month, oldest first.",
    sql="""
SELECT strftime('%Y-%m', appointment_date) AS period, COUNT(*) AS appointment_count
FROM appointments
GROUP BY period
ORDER BY period
""",
)

YEARLY_APPOINTMENT_TREND = QueryDefinition(
    name="yearly_appointment_trend",
    row_type=PeriodCount,
    title="Yearly appointment trend",
    description="Appointment counts per calendar year, oldest first.",
    sql="""
SELECT strftime('%Y', appointment_date) AS period, COUNT(*) AS appointment_count
FROM appointments
GROUP BY period
ORDER BY period
""",
)

DAILY_APPOINTMENT_COUNTS = QueryDefinition(
    name="daily_appointment_counts",
    row_type=DailyCount,
    title="Appointments per day",
    description="Appointment counts per date, oldest first.",
    sql="""
SELECT appointment_date, COUNT(*) AS appointment_count
FROM appointments
GROUP BY appointment_date
ORDER BY appointment_date
""",
)

MEDICATION_FREQUENCY_AND_DOSAGE = QueryDefinition(
    name="medication_frequency_and_dosage",
    row_type=MedicationUsage,
    title="Medication frequency and dosage",
    description="Prescription count and total leading-number dosage per medication.",
    params=("policy",),
    sql="""
SELECT medication, COUNT(*) AS frequency,
    COALESCE(SUM(dosage_amount(dosage)), 0) AS total_dosage
FROM prescriptions
GROUP BY medication
ORDER BY frequency DESC, medication
""",
)

# Skip policy: rows without a leading number drop out of frequency and total
MEDICATION_FREQUENCY_SKIPPING_MALFORMED = QueryDefinition(
    name="medication_frequency_skipping_malformed",
    row_type=MedicationUsage,
    title="Medication frequency and dosage (well-formed dosages only)",
    description="Same as medication_frequency_and_dosage over parseable dosages.",
    sql="""
SELECT medication, COUNT(*) AS frequency, SUM(dosage_amount(dosage)) AS total_dosage
FROM prescriptions
WHERE dosage_amount(dosage) IS NOT NULL
GROUP BY medication
ORDER BY frequency DESC, medication
""",
)

MALFORMED_DOSAGES = QueryDefinition(
    name="malformed_dosages",
    row_type=Prescription,
    title="Malformed dosages",
    description="Prescriptions whose dosage has no leading number.",
    sql="""
SELECT prescription_id, appointment_id, medication, dosage, instructions
FROM prescriptions
WHERE dosage_amount(dosage) IS NULL
ORDER BY prescription_id
""",
)

AVERAGE_BILLING_PER_PATIENT = QueryDefinition(
    name="average_billing_per_patient",
    row_type=PatientBillingAverage,
    title="Average billing per patient",
    description="Every patient with appointment count and average billed amount.",
    sql="""
SELECT p.patient_id, COUNT(a.appointment_id) AS appointment_count,
    AVG(b.amount) AS avg_billing_amount
FROM patients p
LEFT JOIN appointments a ON p.patient_id = a.patient_id
LEFT JOIN billing b ON a.appointment_id = b.appointment_id
GROUP BY p.patient_id
ORDER BY p.patient_id
""",
)

TOP_PATIENTS_BY_TOTAL_BILLED = QueryDefinition(
    name="top_patients_by_total_billed",
    row_type=PatientAmount,
    title="Top patients by total billed",
    description="Patients ranked by total billed amount.",
    params=("limit",),
    sql="""
SELECT p.patient_id, p.first_name, p.last_name,
    ROUND(SUM(b.amount), 2) AS total_amount
FROM patients p
JOIN appointments a ON p.patient_id = a.patient_id
JOIN billing b ON a.appointment_id = b.appointment_id
GROUP BY p.patient_id, p.first_name, p.last_name
ORDER BY total_amount DESC, p.patient_id
LIMIT :row_limit
""",
)

PAYMENT_STATUS_TREND = QueryDefinition(
    name="payment_status_trend",
    row_type=PaymentStatusCount,
    title="Payment status over time",
    description="Billing counts per payment month and status; unpaid rows have no month.",
    sql="""
SELECT strftime('%Y-%m', payment_date) AS payment_month, LOWER(status) AS status,
    COUNT(*) AS billing_count
FROM billing
GROUP BY payment_month, LOWER(status)
ORDER BY payment_month, status
""",
)

PATIENTS_WITH_PENDING_BALANCE = QueryDefinition(
    name="patients_with_pending_balance",
    row_type=PatientAmount,
    title="Unpaid bills",
    description="Per patient, the sum of pending billing amounts.",
    sql="""
SELECT p.patient_id, p.first_name, p.last_name,
    ROUND(SUM(b.amount), 2) AS total_amount
FROM patients p
JOIN appointments a ON p.patient_id = a.patient_id
JOIN billing b ON a.appointment_id = b.appointment_id
WHERE LOWER(b.status) = :pending_status
GROUP BY p.patient_id, p.first_name, p.last_name
ORDER BY total_amount DESC, p.patient_id
""",
)

PATIENTS_WITHOUT_APPOINTMENTS = QueryDefinition(
    name="patients_without_appointments",
    row_type=PatientName,
    title="Patients without appointments",
    description="Registered patients who never had an appointment.",
    sql="""
SELECT p.patient_id, p.first_name, p.last_name
FROM patients p
LEFT JOIN appointments a ON p.patient_id = a.patient_id
WHERE a.appointment_id IS NULL
ORDER BY p.patient_id
""",
)

APPOINTMENTS_FOR_DOCTOR = QueryDefinition(
    name="appointments_for_doctor",
    row_type=DoctorAppointment,
    title="Appointments for doctor",
    description="One doctor's appointments with patient names.",
    params=("doctor_id",),
    sql="""
SELECT a.appointment_id, p.first_name AS patient_first_name,
    p.last_name AS patient_last_name, a.appointment_date, a.reason
FROM appointments a
JOIN patients p ON a.patient_id = p.patient_id
WHERE a.doctor_id = :doctor_id
ORDER BY a.appointment_date, a.appointment_id
""",
)

PATIENTS_WITH_APPOINTMENTS_IN_MONTH = QueryDefinition(
    name="patients_with_appointments_in_month",
    row_type=PatientVisit,
    title="Patients seen in month",
    description="Patients and their appointment dates within one calendar month.",
    params=("year", "month"),
    sql="""
SELECT DISTINCT p.patient_id, p.first_name, p.last_name, p.dob, p.gender,
    a.appointment_date
FROM patients p
JOIN appointments a ON p.patient_id = a.patient_id
WHERE a.appointment_date BETWEEN :month_start AND :month_end
ORDER BY a.appointment_date, p.patient_id
""",
)

DOCTOR_SCHEDULE = QueryDefinition(
    name="doctor_schedule",
    row_type=DoctorScheduleEntry,
    title="Doctor schedule",
    description="Doctors and their patients for appointments in a date range.",
    params=("start_date", "end_date"),
    sql="""
SELECT a.appointment_id, d.first_name AS doctor_first_name,
    d.last_name AS doctor_last_name, a.appointment_date,
    p.first_name AS patient_first_name, p.last_name AS patient_last_name
FROM doctors d
JOIN appointments a ON d.doctor_id = a.doctor_id
JOIN patients p ON a.patient_id = p.patient_id
WHERE a.appointment_date BETWEEN :start_date AND :end_date
ORDER BY a.appointment_date, a.appointment_id
""",
)

DOCTOR_REVENUE_REPORT = QueryDefinition(
    name="doctor_revenue_report",
    row_type=DoctorRevenue,
    title="Revenue per doctor",
    description="Total billed per doctor across their appointments.",
    sql="""
SELECT d.doctor_id, d.first_name, d.last_name, d.specialty,
    ROUND(SUM(b.amount), 2) AS total_billed
FROM doctors d
JOIN appointments a ON d.doctor_id = a.doctor_id
JOIN billing b ON a.appointment_id = b.appointment_id
GROUP BY d.doctor_id, d.first_name, d.last_name, d.specialty
ORDER BY total_billed DESC, d.doctor_id
""",
)


CATALOG: dict[str, QueryDefinition] = {
    q.name: q
    for q in (
        APPOINTMENTS_FOR_PATIENT,
        PRESCRIPTIONS_FOR_APPOINTMENT,
        BILLING_FOR_APPOINTMENT,
        BILLINGS_BY_STATUS,
        BILLING_SUMMARY,
        APPOINTMENTS_WITH_BILLING_STATUS,
        UNBILLED_APPOINTMENTS,
        APPOINTMENT_COUNT_BY_SPECIALTY,
        APPOINTMENT_COUNT_BY_SPECIALTY_ALL_DOCTORS,
        APPOINTMENT_REASONS,
        LATEST_APPOINTMENT_PER_PATIENT,
        DOCTOR_APPOINTMENT_COUNTS,
        PATIENTS_WITH_RECENT_APPOINTMENTS,
        PRESCRIPTIONS_WITH_PENDING_BILLING,
        PATIENT_GENDER_DISTRIBUTION,
        MONTHLY_APPOINTMENT_TREND,
        YEARLY_APPOINTMENT_TREND,
        DAILY_APPOINTMENT_COUNTS,
        MEDICATION_FREQUENCY_AND_DOSAGE,
        AVERAGE_BILLING_PER_PATIENT,
        TOP_PATIENTS_BY_TOTAL_BILLED,
        PAYMENT_STATUS_TREND,
        PATIENTS_WITH_PENDING_BALANCE,
        PATIENTS_WITHOUT_APPOINTMENTS,
        APPOINTMENTS_FOR_DOCTOR,
        PATIENTS_WITH_APPOINTMENTS_IN_MONTH,
        DOCTOR_SCHEDULE,
        DOCTOR_REVENUE_REPORT,
    )
}

# Every statement the layer can issue, including policy variants
ALL_STATEMENTS: tuple[QueryDefinition, ...] = (
    *CATALOG.values(),
    MEDICATION_FREQUENCY_SKIPPING_MALFORMED,
    MALFORMED_DOSAGES,
)

"""Sample clinic dataset for demos and the ``init-db`` command."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from healthreport.core.models import (
    Appointment,
    Billing,
    Dataset,
    Doctor,
    Patient,
    Prescription,
)


SAMPLE_DATASET = Dataset(
    patients=[
        Patient(patient_id=1, first_name="John", last_name="Doe", dob=date(1985, 2, 15),
                gender="Male", contact_number="555-0101", address="12 Elm Street"),
        Patient(patient_id=2, first_name="Jane", last_name="Smith", dob=date(1990, 7, 22),
                gender="Female", contact_number="555-0102", address="48 Oak Avenue"),
        Patient(patient_id=3, first_name="Michael", last_name="Johnson", dob=date(1978, 11, 30),
                gender="Male", contact_number="555-0103", address="7 Pine Road"),
        Patient(patient_id=4, first_name="Emily", last_name="Davis", dob=date(2000, 1, 10),
                gender="Female", contact_number="555-0104", address="230 Maple Lane"),
        Patient(patient_id=5, first_name="David", last_name="Wilson", dob=date(1965, 5, 3),
                gender="Male", contact_number="555-0105", address="9 Cedar Court"),
        Patient(patient_id=6, first_name="Sarah", last_name="Brown", dob=date(1995, 9, 18),
                gender="Female", contact_number="555-0106", address="61 Birch Way"),
    ],
    doctors=[
        Doctor(doctor_id=1, first_name="Alice", last_name="Morgan", specialty="Cardiology",
               contact_number="555-0201"),
        Doctor(doctor_id=2, first_name="Robert", last_name="Lee", specialty="Dermatology",
               contact_number="555-0202"),
        Doctor(doctor_id=3, first_name="Linda", last_name="Patel", specialty="Pediatrics",
               contact_number="555-0203"),
        Doctor(doctor_id=4, first_name="James", last_name="Clark", specialty="Neurology",
               contact_number="555-0204"),
    ],
    appointments=[
        Appointment(appointment_id=1, patient_id=1, doctor_id=1,
                    appointment_date=date(2024, 7, 12), reason="Routine checkup"),
        Appointment(appointment_id=2, patient_id=2, doctor_id=2,
                    appointment_date=date(2024, 7, 20), reason="Skin rash"),
        Appointment(appointment_id=3, patient_id=3, doctor_id=1,
                    appointment_date=date(2024, 8, 1), reason="Chest pain"),
        Appointment(appointment_id=4, patient_id=1, doctor_id=3,
                    appointment_date=date(2024, 8, 5), reason="Routine checkup"),
        Appointment(appointment_id=5, patient_id=4, doctor_id=2,
                    appointment_date=date(2024, 8, 8), reason="Acne follow-up"),
        Appointment(appointment_id=6, patient_id=5, doctor_id=1,
                    appointment_date=date(2024, 8, 10), reason="Hypertension"),
        Appointment(appointment_id=7, patient_id=2, doctor_id=3,
                    appointment_date=date(2024, 8, 15), reason="Routine checkup"),
        Appointment(appointment_id=8, patient_id=3, doctor_id=2,
                    appointment_date=date(2024, 9, 2), reason="Skin rash"),
    ],
    billing=[
        Billing(billing_id=1, appointment_id=1, amount=Decimal("150.00"), status="paid",
                payment_date=date(2024, 7, 13)),
        Billing(billing_id=2, appointment_id=2, amount=Decimal("200.00"), status="pending"),
        Billing(billing_id=3, appointment_id=3, amount=Decimal("450.50"), status="paid",
                payment_date=date(2024, 8, 3)),
        Billing(billing_id=4, appointment_id=4, amount=Decimal("120.00"), status="Pending"),
        Billing(billing_id=5, appointment_id=5, amount=Decimal("180.00"), status="paid",
                payment_date=date(2024, 8, 9)),
        Billing(billing_id=6, appointment_id=6, amount=Decimal("300.00"), status="overdue"),
    ],
    prescriptions=[
        Prescription(prescription_id=1, appointment_id=1, medication="Atorvastatin",
                     dosage="20 mg", instructions="Once daily at bedtime"),
        Prescription(prescription_id=2, appointment_id=2, medication="Hydrocortisone",
                     dosage="1 %", instructions="Apply twice daily"),
        Prescription(prescription_id=3, appointment_id=3, medication="Aspirin",
                     dosage="81 mg", instructions="Once daily with food"),
        Prescription(prescription_id=4, appointment_id=3, medication="Atorvastatin",
                     dosage="40 mg", instructions="Once daily at bedtime"),
        Prescription(prescription_id=5, appointment_id=4, medication="Amoxicillin",
                     dosage="500 mg", instructions="Three times daily for 7 days"),
        Prescription(prescription_id=6, appointment_id=5, medication="Doxycycline",
                     dosage="100 mg", instructions="Twice daily"),
        Prescription(prescription_id=7, appointment_id=6, medication="Lisinopril",
                     dosage="10 mg", instructions="Once daily"),
        Prescription(prescription_id=8, appointment_id=7, medication="Ibuprofen",
                     dosage="as needed", instructions="Take with water for pain"),
    ],
)

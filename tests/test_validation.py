"""Parameter validation happens before any statement reaches the store."""

from __future__ import annotations

import pytest

from healthreport.core.errors import ReportingError, ValidationError
from healthreport.reports.catalog import ReportingQueries


class TestIdentifiers:
    @pytest.mark.parametrize("bad_id", [0, -3, "1", 1.0, None, True])
    def test_ids_must_be_positive_integers(self, queries: ReportingQueries, bad_id: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            queries.appointments_for_patient(bad_id)  # type: ignore[arg-type]
        assert exc_info.value.parameter == "patient_id"

    def test_each_lookup_names_its_parameter(self, queries: ReportingQueries) -> None:
        with pytest.raises(ValidationError, match="appointment_id"):
            queries.prescriptions_for_appointment(0)
        with pytest.raises(ValidationError, match="appointment_id"):
            queries.billing_for_appointment(-1)
        with pytest.raises(ValidationError, match="doctor_id"):
            queries.appointments_for_doctor(0)

    @pytest.mark.parametrize("status", ["", "   ", None])
    def test_status_must_be_non_empty(self, queries: ReportingQueries, status: object) -> None:
        with pytest.raises(ValidationError, match="status"):
            queries.billings_by_status(status)  # type: ignore[arg-type]


class TestBounds:
    def test_negative_limit_is_rejected(self, queries: ReportingQueries) -> None:
        with pytest.raises(ValidationError, match="limit"):
            queries.top_patients_by_total_billed(-1)

    def test_negative_window_is_rejected(self, queries: ReportingQueries) -> None:
        with pytest.raises(ValidationError, match="window_days"):
            queries.patients_with_recent_appointments(-1, "2024-08-15")

    def test_window_reaching_before_year_one(self, queries: ReportingQueries) -> None:
        with pytest.raises(ValidationError, match="window_days"):
            queries.patients_with_recent_appointments(10**6, "0005-01-01")

    @pytest.mark.parametrize(("year", "month"), [(2024, 0), (2024, 13), (0, 5), (10000, 1)])
    def test_month_bounds(self, queries: ReportingQueries, year: int, month: int) -> None:
        with pytest.raises(ValidationError):
            queries.patients_with_appointments_in_month(year, month)

    def test_february_of_a_leap_year(self, queries: ReportingQueries) -> None:
        assert queries.patients_with_appointments_in_month(2024, 2) == []


class TestDates:
    @pytest.mark.parametrize("value", ["2024-13-01", "15/08/2024", "yesterday", "", 20240815])
    def test_malformed_reference_date(self, queries: ReportingQueries, value: object) -> None:
        with pytest.raises(ValidationError, match="reference_date"):
            queries.patients_with_recent_appointments(30, value)  # type: ignore[arg-type]

    def test_schedule_start_after_end(self, queries: ReportingQueries) -> None:
        with pytest.raises(ValidationError, match="start_date"):
            queries.doctor_schedule("2024-08-10", "2024-08-01")

    def test_schedule_single_day(self, queries: ReportingQueries) -> None:
        rows = queries.doctor_schedule("2024-08-05", "2024-08-05")
        assert [r.appointment_id for r in rows] == [4]


class TestRunByName:
    def test_unknown_query(self, queries: ReportingQueries) -> None:
        with pytest.raises(ValidationError, match="unknown query"):
            queries.run("drop_everything")

    def test_policy_variant_statements_are_not_runnable_by_name(
        self, queries: ReportingQueries
    ) -> None:
        with pytest.raises(ValidationError):
            queries.run("malformed_dosages")

    def test_unexpected_parameter(self, queries: ReportingQueries) -> None:
        with pytest.raises(ValidationError) as exc_info:
            queries.run("billing_summary", patient_id=1)
        assert exc_info.value.parameter == "parameters"

    def test_missing_parameter(self, queries: ReportingQueries) -> None:
        with pytest.raises(ValidationError):
            queries.run("appointments_for_patient")

    def test_validation_errors_are_reporting_errors(self, queries: ReportingQueries) -> None:
        with pytest.raises(ReportingError):
            queries.top_patients_by_total_billed(-5)
        with pytest.raises(ValueError):
            queries.top_patients_by_total_billed(-5)

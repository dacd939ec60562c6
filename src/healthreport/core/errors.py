"""Error taxonomy for the reporting layer."""

from __future__ import annotations


class ReportingError(Exception):
    """Base class for every error raised by the reporting layer."""


class DataAccessError(ReportingError):
    """The store is unreachable, rejected the statement, or timed out."""

    def __init__(self, message: str, query: str | None = None) -> None:
        super().__init__(message)
        self.query = query


class ValidationError(ReportingError, ValueError):
    """A caller-supplied parameter violates its contract."""

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(f"Invalid {parameter}: {message}")
        self.parameter = parameter


class DataQualityError(ReportingError):
    """Stored data breaks an assumption a strict report depends on."""

    def __init__(self, message: str, row_ids: list[int] | None = None) -> None:
        super().__init__(message)
        self.row_ids = row_ids or []

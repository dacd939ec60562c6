"""Core type definitions and enums."""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias


# Type aliases for clarity
SQLParam: TypeAlias = str | int | float | None
SQLParams: TypeAlias = dict[str, SQLParam]


class BillingStatus(str, Enum):
    """Known billing statuses. The store may hold others."""

    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class DosagePolicy(str, Enum):
    """How dosage aggregation treats dosages without a leading number."""

    ZERO = "zero"
    SKIP = "skip"
    STRICT = "strict"


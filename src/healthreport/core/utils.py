"""Utility functions shared by the storage and reporting layers."""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from healthreport.core.errors import ValidationError


CENT = Decimal("0.01")
# Largest value a SQLite INTEGER holds
MAX_DOSAGE = 2**63 - 1
_LEADING_DIGITS = re.compile(r"[0-9]+")


def parse_dosage(dosage: str | None) -> int | None:
    """Read the leading numeric token of a dosage string.

    The first whitespace-separated token is taken and its leading run of
    digits is read as an unsigned integer, so ``"500 mg"`` and ``"500mg"``
    both give 500 and ``"2.5 ml"`` gives 2.

    Args:
        dosage: Free-text dosage, conventionally ``"<number> <unit>"``.

    Returns:
        The parsed amount, or None when the dosage has no leading number or
        the number is larger than ``MAX_DOSAGE``.
    """
    if not dosage:
        return None
    tokens = dosage.split()
    if not tokens:
        return None
    match = _LEADING_DIGITS.match(tokens[0])
    if not match:
        return None
    amount = int(match.group())
    return amount if amount <= MAX_DOSAGE else None


def to_money(value: Any) -> Decimal:
    """Quantize a store value (float, int, str or Decimal) to cents."""
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"not a monetary amount: {value!r}") from e
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def coerce_date(name: str, value: date | datetime | str) -> date:
    """Validate a caller-supplied date parameter."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise ValidationError(name, f"expected YYYY-MM-DD, got {value!r}") from e
    raise ValidationError(name, f"expected a date, got {type(value).__name__}")


def require_int(name: str, value: Any, minimum: int = 0, maximum: int | None = None) -> int:
    """Validate an integer parameter against its bounds."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(name, f"expected an integer, got {value!r}")
    if value < minimum:
        raise ValidationError(name, f"must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ValidationError(name, f"must be <= {maximum}, got {value}")
    return value


def require_id(name: str, value: Any) -> int:
    return require_int(name, value, minimum=1)

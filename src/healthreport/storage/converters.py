"""Converters for database rows to model objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from healthreport.core.errors import DataAccessError
from healthreport.core.models import Row


if TYPE_CHECKING:
    import sqlite3

R = TypeVar("R", bound=Row)


def row_to_model(row: sqlite3.Row, model: type[R]) -> R:
    """Convert a database row to a row model, matching columns by name."""
    try:
        return model.model_validate(dict(row))
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        raise DataAccessError(
            f"Store returned a row that does not fit {model.__name__}: {e}"
        ) from e


def rows_to_models(rows: list[sqlite3.Row], model: type[R]) -> list[R]:
    return [row_to_model(row, model) for row in rows]

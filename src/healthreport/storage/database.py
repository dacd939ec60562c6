"""SQLite store access for the reporting layer."""

from __future__ import annotations

import logging
import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from healthreport.core.errors import DataAccessError
from healthreport.core.utils import parse_dosage
from healthreport.storage.schema import INIT_SCHEMA, TABLES


if TYPE_CHECKING:
    from collections.abc import Iterator

    from healthreport.config.settings import Settings
    from healthreport.core.models import Dataset
    from healthreport.core.types import SQLParams

logger = logging.getLogger(__name__)

# VM instructions between timeout checks
PROGRESS_INTERVAL = 1000


class HealthcareDatabase:
    """SQLite healthcare store.

    Reporting reads go through read-only connections, one per call. Schema
    creation and data loading are setup steps and open a writable connection.
    """

    def __init__(
        self,
        db_path: str | Path = "healthcare.db",
        query_timeout: float | None = None,
        busy_timeout: float = 5.0,
    ) -> None:
        self.db_path = Path(db_path)
        self.query_timeout = query_timeout
        self.busy_timeout = busy_timeout

    @classmethod
    def from_settings(cls, settings: Settings, db_path: str | Path | None = None) -> HealthcareDatabase:
        return cls(
            db_path or settings.database.path,
            query_timeout=settings.database.query_timeout,
            busy_timeout=settings.database.busy_timeout,
        )

    @contextmanager
    def _connection(self, read_only: bool = True) -> Iterator[sqlite3.Connection]:
        if read_only:
            uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
            conn = sqlite3.connect(uri, uri=True, timeout=self.busy_timeout)
        else:
            conn = sqlite3.connect(self.db_path, timeout=self.busy_timeout)
            conn.execute("PRAGMA foreign_keys = ON")
        conn.row_factory = sqlite3.Row
        conn.create_function("dosage_amount", 1, parse_dosage, deterministic=True)
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def fetch_all(
        self, sql: str, params: SQLParams | None = None, name: str = "query"
    ) -> list[sqlite3.Row]:
        """Execute a read statement and materialize its rows.

        Args:
            sql: Statement with named placeholders.
            params: Values for the placeholders.
            name: Catalog name, used in logs and error messages.

        Returns:
            Every result row, in statement order.

        Raises:
            DataAccessError: The store is unavailable, rejected the
                statement, or the query timed out.
        """
        logger.debug("Running %s", name)
        deadline: float | None = None
        try:
            with self._connection() as conn:
                if self.query_timeout is not None:
                    deadline = time.monotonic() + self.query_timeout
                    conn.set_progress_handler(
                        lambda: int(time.monotonic() > deadline), PROGRESS_INTERVAL
                    )
                return conn.execute(sql, params or {}).fetchall()
        except sqlite3.Error as e:
            if deadline is not None and time.monotonic() > deadline:
                message = f"{name} timed out after {self.query_timeout}s"
            else:
                message = f"{name} failed against {self.db_path}: {e}"
            logger.warning(message)
            raise DataAccessError(message, query=name) from e

    def fetch_one(
        self, sql: str, params: SQLParams | None = None, name: str = "query"
    ) -> sqlite3.Row:
        rows = self.fetch_all(sql, params, name)
        if not rows:
            raise DataAccessError(f"{name} returned no row", query=name)
        return rows[0]

    def initialize(self) -> None:
        """Create the schema if it does not exist yet."""
        try:
            with self._connection(read_only=False) as conn:
                conn.executescript(INIT_SCHEMA)
        except sqlite3.Error as e:
            raise DataAccessError(f"Could not initialize {self.db_path}: {e}") from e
        logger.info("Schema ready at %s", self.db_path)

    def load_dataset(self, dataset: Dataset) -> None:
        """Insert a dataset in dependency order, in one transaction."""
        try:
            with self._connection(read_only=False) as conn:
                conn.executemany(
                    "INSERT INTO patients VALUES (?, ?, ?, ?, ?, ?, ?)",
                    [
                        (p.patient_id, p.first_name, p.last_name,
                         p.dob.isoformat() if p.dob else None, p.gender,
                         p.contact_number, p.address)
                        for p in dataset.patients
                    ],
                )
                conn.executemany(
                    "INSERT INTO doctors VALUES (?, ?, ?, ?, ?)",
                    [
                        (d.doctor_id, d.first_name, d.last_name, d.specialty, d.contact_number)
                        for d in dataset.doctors
                    ],
                )
                conn.executemany(
                    "INSERT INTO appointments VALUES (?, ?, ?, ?, ?)",
                    [
                        (a.appointment_id, a.patient_id, a.doctor_id,
                         a.appointment_date.isoformat(), a.reason)
                        for a in dataset.appointments
                    ],
                )
                conn.executemany(
                    "INSERT INTO billing VALUES (?, ?, ?, ?, ?)",
                    [
                        (b.billing_id, b.appointment_id, str(b.amount), b.status,
                         b.payment_date.isoformat() if b.payment_date else None)
                        for b in dataset.billing
                    ],
                )
                conn.executemany(
                    "INSERT INTO prescriptions VALUES (?, ?, ?, ?, ?)",
                    [
                        (r.prescription_id, r.appointment_id, r.medication, r.dosage,
                         r.instructions)
                        for r in dataset.prescriptions
                    ],
                )
        except sqlite3.Error as e:
            raise DataAccessError(f"Could not load data into {self.db_path}: {e}") from e
        logger.info(
            "Loaded %d patients, %d appointments into %s",
            len(dataset.patients), len(dataset.appointments), self.db_path,
        )

    def load_sample_data(self) -> bool:
        """Load the bundled sample dataset into an empty store.

        Returns:
            False when the store already holds patients and nothing was loaded.
        """
        from healthreport.storage.sample_data import SAMPLE_DATASET  # noqa: PLC0415

        if self.get_stats()["patients"] > 0:
            return False
        self.load_dataset(SAMPLE_DATASET)
        return True

    def get_stats(self) -> dict[str, int]:
        """Get row counts per table."""
        return {
            table: self.fetch_one(
                f"SELECT COUNT(*) AS cnt FROM {table}", name=f"count_{table}"
            )["cnt"]
            for table in TABLES
        }

"""SQL validation for the query catalog."""

from __future__ import annotations

import logging

import sqlglot
from pydantic import BaseModel, Field
from sqlglot import exp

from healthreport.reports.queries import ALL_STATEMENTS
from healthreport.storage.schema import INIT_SCHEMA


logger = logging.getLogger(__name__)


class StatementCheck(BaseModel):
    """Outcome of checking one statement against the schema."""
    name: str
    is_valid: bool = False
    is_read_only: bool = False
    tables_used: list[str] = Field(default_factory=list)
    columns_used: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.is_valid and self.is_read_only and not self.warnings


class SQLValidator:
    """Checks statements parse and only reference tables and columns in the schema."""

    def __init__(self, schema_sql: str = INIT_SCHEMA, dialect: str = "sqlite") -> None:
        self.dialect = dialect
        self._schema_tables = self._parse_schema(schema_sql)

    @property
    def schema_tables(self) -> dict[str, list[str]]:
        return self._schema_tables

    def _parse_schema(self, schema_sql: str) -> dict[str, list[str]]:
        """Extract table and column names from CREATE TABLE statements."""
        tables: dict[str, list[str]] = {}
        for statement in sqlglot.parse(schema_sql, read=self.dialect):
            if not isinstance(statement, exp.Create) or statement.args.get("kind") != "TABLE":
                continue
            target = statement.this
            table = target.this if isinstance(target, exp.Schema) else target
            tables[table.name.lower()] = [
                col.name.lower() for col in target.find_all(exp.ColumnDef)
            ]
        return tables

    def validate(self, sql: str, name: str = "query") -> StatementCheck:
        """Validate SQL syntax, read-only-ness and schema references."""
        result = StatementCheck(name=name)
        try:
            parsed = sqlglot.parse_one(sql, read=self.dialect)
        except sqlglot.errors.ParseError as e:
            result.error = f"SQL syntax error: {e}"
            return result

        result.is_read_only = isinstance(parsed, (exp.Select, exp.Union))
        if not result.is_read_only:
            result.warnings.append(f"Not a read statement: {type(parsed).__name__}")

        aliases: dict[str, str] = {}
        for table in parsed.find_all(exp.Table):
            table_name = table.name.lower()
            aliases[table.alias_or_name.lower()] = table_name
            if table_name not in self._schema_tables:
                result.warnings.append(f"Unknown table: {table_name}")
        result.tables_used = sorted(set(aliases.values()))
        output_names = {a.alias.lower() for a in parsed.find_all(exp.Alias)}

        columns_used: set[str] = set()
        for column in parsed.find_all(exp.Column):
            if isinstance(column.this, exp.Star):
                continue
            col_name = column.name.lower()
            columns_used.add(col_name)
            table_ref = column.table.lower() if column.table else None
            if table_ref:
                table_name = aliases.get(table_ref, table_ref)
                col_found = col_name in self._schema_tables.get(table_name, [])
            else:
                col_found = col_name in output_names or any(
                    col_name in self._schema_tables.get(t, []) for t in result.tables_used
                )
            if not col_found:
                result.warnings.append(f"Unknown column: {col_name}")
        result.columns_used = sorted(columns_used)

        result.is_valid = True
        return result

    def check_catalog(self) -> list[StatementCheck]:
        """Validate every statement the reporting layer can issue."""
        checks = [self.validate(q.sql, q.name) for q in ALL_STATEMENTS]
        for check in checks:
            if not check.ok:
                logger.warning("%s: %s", check.name, check.error or "; ".join(check.warnings))
        return checks

    def format_sql(self, sql: str) -> str:
        """Format SQL query for readability."""
        try:
            return sqlglot.parse_one(sql, read=self.dialect).sql(dialect=self.dialect, pretty=True)
        except sqlglot.errors.ParseError:
            return sql

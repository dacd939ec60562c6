"""Tools module - report rendering and SQL checking."""

from __future__ import annotations

from healthreport.tools.html import HTMLRenderer
from healthreport.tools.sql import SQLValidator, StatementCheck


__all__ = [
    "HTMLRenderer",
    "SQLValidator",
    "StatementCheck",
]

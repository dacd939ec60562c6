"""Configuration module."""

from __future__ import annotations

from healthreport.config.settings import DatabaseSettings, ReportSettings, Settings


__all__ = ["DatabaseSettings", "ReportSettings", "Settings"]

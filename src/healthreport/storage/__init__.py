"""Storage layer for the healthcare store."""

from healthreport.storage.database import HealthcareDatabase
from healthreport.storage.sample_data import SAMPLE_DATASET

__all__ = ["SAMPLE_DATASET", "HealthcareDatabase"]

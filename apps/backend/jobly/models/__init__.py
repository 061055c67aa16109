"""Database models for Jobly."""

from .base import Base
from .company import Company
from .job import Job

__all__ = [
    "Base",
    "Company",
    "Job",
]

"""
Data access layer for job listings.
"""

from job_portal.repository.base import JobListingRepository
from job_portal.repository.logging_repository import LoggingJobListingRepository

__all__ = ["JobListingRepository", "LoggingJobListingRepository"]

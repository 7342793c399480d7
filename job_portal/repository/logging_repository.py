"""
Repository that logs and records saved listings in memory.
"""

import structlog

from job_portal.models.listing import JobListing
from job_portal.repository.base import JobListingRepository

logger = structlog.get_logger()


class LoggingJobListingRepository(JobListingRepository):
    """Stand-in for a database: logs each save and keeps the listing."""

    def __init__(self):
        self.saved: list[JobListing] = []

    def save(self, listing: JobListing) -> None:
        logger.info("Saving job listing to database", title=listing.title)
        self.saved.append(listing)

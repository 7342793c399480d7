"""
Base repository interface for job listings.
"""

from abc import ABC, abstractmethod

from job_portal.models.listing import JobListing


class JobListingRepository(ABC):
    """Abstract base class for job listing storage."""

    @abstractmethod
    def save(self, listing: JobListing) -> None:
        """
        Store a job listing.

        Raises:
            StorageError: If the listing could not be stored.
        """
        raise NotImplementedError

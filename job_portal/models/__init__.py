"""
Data models for the Job Portal.
"""

from job_portal.models.listing import JobListing, create_job_listing

__all__ = ["JobListing", "create_job_listing"]

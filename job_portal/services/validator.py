"""
Validation rules for job listings.

A listing can be posted when it has a title and a description. Every other
field is accepted as given, including a negative salary or empty location.
"""

from enum import Enum

from job_portal.models.listing import JobListing


class ValidationIssue(Enum):
    MISSING_TITLE = "missing_title"
    MISSING_DESCRIPTION = "missing_description"


def validate_listing(listing: JobListing) -> list[ValidationIssue]:
    """Return the reasons a listing cannot be posted (empty when it can)."""
    issues = []
    if not listing.title:
        issues.append(ValidationIssue.MISSING_TITLE)
    if not listing.description:
        issues.append(ValidationIssue.MISSING_DESCRIPTION)
    return issues


def is_valid(listing: JobListing) -> bool:
    """Check whether title and description are both present and non-empty."""
    return not validate_listing(listing)

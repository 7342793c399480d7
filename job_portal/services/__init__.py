"""
Business logic for posting job listings.
"""

from job_portal.services.posting_workflow import (
    Posted,
    PostingOutcome,
    PostingWorkflow,
    Rejected,
    build_posting_workflow,
)
from job_portal.services.validator import ValidationIssue, is_valid, validate_listing

__all__ = [
    "Posted",
    "PostingOutcome",
    "PostingWorkflow",
    "Rejected",
    "build_posting_workflow",
    "ValidationIssue",
    "is_valid",
    "validate_listing",
]

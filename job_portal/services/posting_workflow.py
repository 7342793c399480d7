"""
Job listing posting workflow.

Runs one listing through form display, preview, validation, and then either
storage, confirmation and publication, or rejection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

import structlog

from job_portal.exceptions import StorageError
from job_portal.models.listing import JobListing
from job_portal.notifications.base import Notification, NotificationKind, NotificationSink
from job_portal.notifications.sinks import LoggingNotificationSink
from job_portal.repository.base import JobListingRepository
from job_portal.repository.logging_repository import LoggingJobListingRepository
from job_portal.services.validator import ValidationIssue, validate_listing

if TYPE_CHECKING:
    from job_portal.employer import Employer

logger = structlog.get_logger()


@dataclass(frozen=True)
class Posted:
    """The listing was stored and is visible to job seekers."""

    listing: JobListing
    posted: bool = True

    def __str__(self) -> str:
        return f"✓ Posted: {self.listing.title} ({self.listing.salary_display})"


@dataclass(frozen=True)
class Rejected:
    """The listing failed validation and was not stored."""

    listing: JobListing
    reasons: tuple[ValidationIssue, ...] = ()
    posted: bool = False

    def __str__(self) -> str:
        reasons = ", ".join(r.value for r in self.reasons)
        return f"✗ Rejected: {self.listing.title!r} ({reasons})"


PostingOutcome = Union[Posted, Rejected]


class PostingWorkflow:
    """Coordinates the steps of posting a single job listing."""

    def __init__(self, repository: JobListingRepository, notifier: NotificationSink):
        self.repository = repository
        self.notifier = notifier

    def post(self, listing: JobListing, employer: Employer) -> PostingOutcome:
        """
        Post a job listing on behalf of an employer.

        Args:
            listing: The listing to post.
            employer: Employer who submitted the listing; receives the confirmation.

        Returns:
            Posted when the listing was stored, Rejected when it failed validation.

        Raises:
            StorageError: If the repository could not store the listing.
        """
        self._display_form()
        self._preview(listing)

        issues = validate_listing(listing)
        if issues:
            return self._reject(listing, issues)

        try:
            self.repository.save(listing)
        except StorageError as e:
            logger.error("Failed to save job listing", title=listing.title, error=str(e))
            raise

        self._confirm(employer, listing)
        self._make_visible(listing)
        logger.info("Job listing posted", title=listing.title, employer=employer.name)
        return Posted(listing)

    def _display_form(self) -> None:
        self.notifier.notify(Notification(
            kind=NotificationKind.FORM_DISPLAYED,
            message="Displaying job posting form.",
        ))

    def _preview(self, listing: JobListing) -> None:
        self.notifier.notify(Notification(
            kind=NotificationKind.PREVIEW_DISPLAYED,
            message=f"Displaying job preview for '{listing.title}'.",
            details=listing.to_dict(),
        ))

    def _confirm(self, employer: Employer, listing: JobListing) -> None:
        self.notifier.notify(Notification(
            kind=NotificationKind.LISTING_CONFIRMED,
            message=f"Job listing creation confirmed for {employer.name}.",
            recipient=employer.name,
            details={"title": listing.title},
        ))

    def _make_visible(self, listing: JobListing) -> None:
        self.notifier.notify(Notification(
            kind=NotificationKind.LISTING_VISIBLE,
            message="Making job listing visible to job seekers.",
            details={"title": listing.title},
        ))

    def _reject(self, listing: JobListing, issues: list[ValidationIssue]) -> Rejected:
        self.notifier.notify(Notification(
            kind=NotificationKind.LISTING_REJECTED,
            message="Job details are invalid. Displaying error message.",
            details={"reasons": [issue.value for issue in issues]},
        ))
        logger.info(
            "Job listing rejected",
            title=listing.title,
            reasons=[issue.value for issue in issues],
        )
        return Rejected(listing, tuple(issues))


def build_posting_workflow(
    repository: Optional[JobListingRepository] = None,
    notifier: Optional[NotificationSink] = None,
) -> PostingWorkflow:
    """
    Compose a PostingWorkflow.

    Defaults to the logging repository and logging notification sink.
    """
    return PostingWorkflow(
        repository=repository if repository is not None else LoggingJobListingRepository(),
        notifier=notifier if notifier is not None else LoggingNotificationSink(),
    )

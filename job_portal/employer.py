from __future__ import annotations

from typing import Optional

from job_portal.models.listing import create_job_listing
from job_portal.notifications.base import Notification, NotificationKind, NotificationSink
from job_portal.services.posting_workflow import PostingOutcome, PostingWorkflow


class Employer:
    """An employer posting listings through a workflow."""

    def __init__(
        self,
        name: str,
        workflow: PostingWorkflow,
        notifier: Optional[NotificationSink] = None,
    ) -> None:
        self.name = name
        self._workflow = workflow
        self._notifier = notifier if notifier is not None else workflow.notifier

    def post_job_listing(
        self,
        title: Optional[str],
        description: Optional[str],
        skills: str,
        job_type: str,
        location: str,
        salary: float,
    ) -> PostingOutcome:
        self._notifier.notify(Notification(
            kind=NotificationKind.NAVIGATED_TO_POSTING_PAGE,
            message=f"{self.name} is navigating to 'Post a Job' page.",
            recipient=self.name,
        ))
        listing = create_job_listing(title, description, skills, job_type, location, salary)
        return self._workflow.post(listing, self)

    def __repr__(self) -> str:
        return f"Employer(name={self.name!r})"

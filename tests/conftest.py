"""
Pytest configuration and fixtures for Job Portal tests.
"""

import pytest

from job_portal.employer import Employer
from job_portal.models.listing import JobListing
from job_portal.notifications import RecordingNotificationSink
from job_portal.repository import LoggingJobListingRepository
from job_portal.services.posting_workflow import PostingWorkflow


@pytest.fixture
def repository():
    """Repository that records saved listings."""
    return LoggingJobListingRepository()


@pytest.fixture
def recorder():
    """Sink that records notifications."""
    return RecordingNotificationSink()


@pytest.fixture
def workflow(repository, recorder):
    return PostingWorkflow(repository=repository, notifier=recorder)


@pytest.fixture
def employer(workflow):
    return Employer("John Doe", workflow)


@pytest.fixture
def engineer_listing():
    """The sample Software Engineer listing."""
    return JobListing(
        title="Software Engineer",
        description="Responsible for developing applications.",
        skills="Java, Spring Boot",
        job_type="Full-Time",
        location="Remote",
        salary=85000.00,
    )


# Markers for test categories
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that run the full CLI")

"""
Notification sink and repository logging tests.
"""

from structlog.testing import capture_logs

from job_portal.models.listing import JobListing
from job_portal.notifications import (
    CompositeNotificationSink,
    LoggingNotificationSink,
    Notification,
    NotificationKind,
    RecordingNotificationSink,
)
from job_portal.repository import LoggingJobListingRepository


def _form_displayed():
    return Notification(kind=NotificationKind.FORM_DISPLAYED, message="Displaying job posting form.")


class TestRecordingSink:
    def test_records_in_order(self):
        sink = RecordingNotificationSink()
        second = Notification(kind=NotificationKind.LISTING_VISIBLE, message="visible")

        sink.notify(_form_displayed())
        sink.notify(second)

        assert sink.kinds == [NotificationKind.FORM_DISPLAYED, NotificationKind.LISTING_VISIBLE]
        assert sink.notifications[1] is second

    def test_clear(self):
        sink = RecordingNotificationSink()
        sink.notify(_form_displayed())
        sink.clear()
        assert sink.notifications == []


class TestCompositeSink:
    def test_fans_out_to_every_sink(self):
        first, second = RecordingNotificationSink(), RecordingNotificationSink()
        composite = CompositeNotificationSink([first, second])

        composite.notify(_form_displayed())

        assert first.kinds == [NotificationKind.FORM_DISPLAYED]
        assert second.kinds == [NotificationKind.FORM_DISPLAYED]


class TestLoggingSink:
    def test_logs_structured_event(self):
        notification = Notification(
            kind=NotificationKind.LISTING_CONFIRMED,
            message="Job listing creation confirmed for Acme.",
            recipient="Acme",
            details={"title": "Dev"},
        )

        with capture_logs() as logs:
            LoggingNotificationSink().notify(notification)

        assert logs == [{
            "event": "Job listing creation confirmed for Acme.",
            "log_level": "info",
            "kind": "listing_confirmed",
            "recipient": "Acme",
            "title": "Dev",
        }]

    def test_rejection_logged_as_warning(self):
        notification = Notification(
            kind=NotificationKind.LISTING_REJECTED,
            message="Job details are invalid. Displaying error message.",
            details={"reasons": ["missing_title"]},
        )

        with capture_logs() as logs:
            LoggingNotificationSink().notify(notification)

        assert logs[0]["log_level"] == "warning"
        assert logs[0]["reasons"] == ["missing_title"]


class TestNotification:
    def test_str_is_message(self):
        assert str(_form_displayed()) == "Displaying job posting form."


class TestLoggingRepository:
    def test_save_logs_and_records(self):
        repository = LoggingJobListingRepository()
        listing = JobListing(title="Dev", description="Code.")

        with capture_logs() as logs:
            repository.save(listing)

        assert repository.saved == [listing]
        assert logs[0]["event"] == "Saving job listing to database"
        assert logs[0]["title"] == "Dev"

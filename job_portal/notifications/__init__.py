"""
Structured notifications emitted by the posting workflow.
"""

from job_portal.notifications.base import Notification, NotificationKind, NotificationSink
from job_portal.notifications.sinks import (
    CompositeNotificationSink,
    LoggingNotificationSink,
    RecordingNotificationSink,
)

__all__ = [
    "Notification",
    "NotificationKind",
    "NotificationSink",
    "CompositeNotificationSink",
    "LoggingNotificationSink",
    "RecordingNotificationSink",
]

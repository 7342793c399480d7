"""
Notification sink implementations.
"""

from typing import Iterable

import structlog

from job_portal.notifications.base import Notification, NotificationKind, NotificationSink

logger = structlog.get_logger()


class LoggingNotificationSink(NotificationSink):
    """Writes each notification as a structlog event."""

    def notify(self, notification: Notification) -> None:
        log = logger.warning if notification.kind is NotificationKind.LISTING_REJECTED else logger.info
        log(
            notification.message,
            kind=notification.kind.value,
            recipient=notification.recipient,
            **notification.details,
        )


class RecordingNotificationSink(NotificationSink):
    """Keeps notifications in memory so callers can inspect them."""

    def __init__(self):
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def kinds(self) -> list[NotificationKind]:
        return [n.kind for n in self.notifications]

    def clear(self) -> None:
        self.notifications.clear()


class CompositeNotificationSink(NotificationSink):
    """Forwards every notification to each of its sinks, in order."""

    def __init__(self, sinks: Iterable[NotificationSink]):
        self.sinks = list(sinks)

    def notify(self, notification: Notification) -> None:
        for sink in self.sinks:
            sink.notify(notification)

"""
Notification types and the sink interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class NotificationKind(Enum):
    NAVIGATED_TO_POSTING_PAGE = "navigated_to_posting_page"
    FORM_DISPLAYED = "form_displayed"
    PREVIEW_DISPLAYED = "preview_displayed"
    LISTING_CONFIRMED = "listing_confirmed"
    LISTING_VISIBLE = "listing_visible"
    LISTING_REJECTED = "listing_rejected"


@dataclass(frozen=True)
class Notification:
    """A human-readable event emitted while posting a listing."""

    kind: NotificationKind
    message: str
    recipient: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class NotificationSink(ABC):
    """Receives notifications from the posting workflow."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        raise NotImplementedError

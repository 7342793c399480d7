"""
Exception types raised by the job portal.
"""

from typing import Optional


class JobPortalError(Exception):
    """Base class for job portal errors."""


class StorageError(JobPortalError):
    """Raised by a repository when a listing cannot be stored."""

    def __init__(self, message: str, title: Optional[str] = None):
        super().__init__(message)
        self.title = title

"""
Configuration module for the Job Portal.
"""

from job_portal.config.logging_setup import configure_logging
from job_portal.config.settings import settings, Settings, PROJECT_ROOT

__all__ = ["settings", "Settings", "PROJECT_ROOT", "configure_logging"]

"""
Job listing model and factory.
"""

from dataclasses import dataclass, fields
from typing import Optional

# Alternate spellings accepted by from_dict
FIELD_ALIASES = {
    'jobType': 'job_type',
}


@dataclass(frozen=True)
class JobListing:
    """Represents a job posting submitted by an employer."""

    title: Optional[str] = None
    description: Optional[str] = None
    skills: str = ""  # free-form, e.g. "Java, Spring Boot"
    job_type: str = ""  # Full-Time, Part-Time, Contract, ...
    location: str = ""
    salary: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> "JobListing":
        """
        Create a JobListing from a dictionary, ignoring unknown keys.

        ``jobType`` is read as ``job_type``; the snake_case key wins if both are given.
        """
        known_fields = {f.name for f in fields(cls)}
        filtered = {}
        for key, value in data.items():
            name = FIELD_ALIASES.get(key, key)
            if name in known_fields and not (name != key and name in data):
                filtered[name] = value
        return cls(**filtered)

    def to_dict(self) -> dict:
        """Convert JobListing to a plain dictionary."""
        return {
            'title': self.title,
            'description': self.description,
            'skills': self.skills,
            'job_type': self.job_type,
            'location': self.location,
            'salary': self.salary,
        }

    @property
    def salary_display(self) -> str:
        """Format salary for display."""
        return f"${self.salary:,.2f}"


def create_job_listing(
    title: Optional[str],
    description: Optional[str],
    skills: str,
    job_type: str,
    location: str,
    salary: float,
) -> JobListing:
    """
    Build a JobListing from raw form values.

    Values are copied as given; nothing is checked here.
    """
    return JobListing(
        title=title,
        description=description,
        skills=skills,
        job_type=job_type,
        location=location,
        salary=salary,
    )

"""
Job Portal - post job listings through a layered posting workflow.
"""

__version__ = "0.1.0"

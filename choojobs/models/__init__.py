"""Data models for records returned by the API."""

from .base import ApiModel
from .user import User, AuthSession
from .job import Job, JobPage
from .resume import Resume, ResumeExport
from .application import Application, ApplicationStatus, SavedJob
from .analysis import AnalysisResult
from .billing import PaymentInitialization
from .admin import AdminStats

__all__ = [
    "ApiModel",
    "User",
    "AuthSession",
    "Job",
    "JobPage",
    "Resume",
    "ResumeExport",
    "Application",
    "ApplicationStatus",
    "SavedJob",
    "AnalysisResult",
    "PaymentInitialization",
    "AdminStats",
]

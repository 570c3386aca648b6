"""Service layer modules."""

from .api_client import ApiClient
from .auth_service import AuthService
from .job_service import JobService
from .saved_job_service import SavedJobService
from .application_service import ApplicationService
from .resume_service import ResumeService
from .payment_service import PaymentService
from .admin_service import AdminService

__all__ = [
    "ApiClient",
    "AuthService",
    "JobService",
    "SavedJobService",
    "ApplicationService",
    "ResumeService",
    "PaymentService",
    "AdminService",
]

"""
Job application tracking service.
"""

from typing import List, Optional

from choojobs.exceptions import ApiError, FormValidationError
from choojobs.models import Application, ApplicationStatus
from choojobs.services.api_client import ApiClient
from choojobs.utils.logger import get_logger

logger = get_logger(__name__)


class ApplicationService:
    """Apply to jobs and manage submitted applications."""
    
    def __init__(self, client: ApiClient):
        self.client = client
    
    def list_applications(self) -> List[Application]:
        data = self.client.get("/applications")
        if isinstance(data, dict):
            data = data.get("applications") or []
        return [Application.from_api(item) for item in data or []]
    
    def apply(self, job_id: str, resume_id: str, cover_letter: Optional[str] = None) -> None:
        """
        Submit an application for a job.
        
        Args:
            job_id: Job to apply to
            resume_id: Resume to attach
            cover_letter: Optional cover letter text
            
        Raises:
            FormValidationError: If no resume was chosen
        """
        if not resume_id:
            raise FormValidationError("Please select a resume")
        
        self.client.post(f"/applications/jobs/{job_id}/apply", json={
            "resumeId": resume_id,
            "coverLetter": cover_letter or "",
        })
        logger.info(f"📤 Applied to job {job_id} with resume {resume_id}")
    
    def withdraw(self, application_id: str) -> None:
        self.client.put(f"/applications/{application_id}/withdraw")
        logger.info(f"Withdrew application {application_id}")
    
    def status_for_job(self, job_id: str) -> ApplicationStatus:
        """Application state for a job; errors count as not applied."""
        try:
            return ApplicationStatus.from_api(self.client.get(f"/applications/jobs/{job_id}/status") or {})
        except ApiError as e:
            logger.debug(f"No application status for job {job_id}: {e}")
            return ApplicationStatus()

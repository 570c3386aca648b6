"""
Saved job bookmarks.
"""

from typing import List

from choojobs.models import SavedJob
from choojobs.services.api_client import ApiClient


class SavedJobService:
    """Save and unsave jobs for later."""
    
    def __init__(self, client: ApiClient):
        self.client = client
    
    def list_saved(self) -> List[SavedJob]:
        data = self.client.get("/saved-jobs")
        if isinstance(data, dict):
            data = data.get("savedJobs") or []
        return [SavedJob.from_api(item) for item in data or []]
    
    def is_saved(self, job_id: str) -> bool:
        data = self.client.get(f"/saved-jobs/jobs/{job_id}/status")
        return isinstance(data, dict) and data.get("saved") is True
    
    def save(self, job_id: str) -> None:
        self.client.post(f"/saved-jobs/jobs/{job_id}/save")
    
    def unsave(self, job_id: str) -> None:
        self.client.delete(f"/saved-jobs/jobs/{job_id}/save")
    
    def toggle(self, job_id: str, currently_saved: bool) -> bool:
        """Flip the saved state and return the new one."""
        if currently_saved:
            self.unsave(job_id)
            return False
        self.save(job_id)
        return True

"""
Job listing and AI match analysis service.
"""

from choojobs.exceptions import ApiError
from choojobs.models import AnalysisResult, Job, JobPage
from choojobs.services.api_client import ApiClient, unwrap
from choojobs.utils.logger import get_logger

logger = get_logger(__name__)


class JobService:
    """Browse scraped jobs and score resumes against them."""
    
    def __init__(self, client: ApiClient):
        self.client = client
    
    def list_jobs(self, search: str = "", location: str = "", page: int = 1) -> JobPage:
        """
        Fetch one page of jobs matching the filters.
        
        Args:
            search: Title or keyword filter
            location: Location filter
            page: 1-based page number
            
        Returns:
            JobPage with the matching jobs
        """
        params = {}
        if search:
            params["search"] = search
        if location:
            params["location"] = location
        if page > 1:
            params["page"] = page
        
        data = self.client.get("/jobs", params=params) or {}
        if isinstance(data, list):
            data = {"jobs": data}
        if not isinstance(data, dict):
            raise ApiError("/jobs returned an unexpected body")
        data.setdefault("page", page)
        return JobPage.from_api(data)
    
    def get_job(self, job_id: str) -> Job:
        return Job.from_api(self.client.get(f"/jobs/{job_id}"))
    
    def analyze_resume(self, job_id: str, resume_id: str) -> AnalysisResult:
        """
        Run the AI match engine for a resume against a job.
        
        Each run costs the user one credit on the free plan.
        
        Args:
            job_id: Job to match against
            resume_id: Resume to score
            
        Returns:
            AnalysisResult with score and feedback
        """
        logger.info(f"🤖 Analyzing resume {resume_id} against job {job_id}")
        data = self.client.post(f"/jobs/{job_id}/analyze-resume", json={"resumeId": resume_id})
        result = AnalysisResult.from_api(unwrap(data, "data", f"/jobs/{job_id}/analyze-resume"))
        logger.info(f"   ✅ Match score: {result.percent}")
        return result

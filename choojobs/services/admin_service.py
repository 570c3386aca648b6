"""
Admin panel service.
"""

from choojobs.models import AdminStats
from choojobs.services.api_client import ApiClient
from choojobs.utils.logger import get_logger

logger = get_logger(__name__)


class AdminService:
    """Platform statistics and scraper control for administrators."""
    
    def __init__(self, client: ApiClient):
        self.client = client
    
    def stats(self) -> AdminStats:
        return AdminStats.from_api(self.client.get("/admin/stats") or {})
    
    def trigger_scrape(self) -> None:
        self.client.post("/admin/scrape")
        logger.info("🔄 Scraper triggered")

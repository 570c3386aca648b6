"""Admin dashboard statistics."""

from typing import Optional

from pydantic import Field, field_validator

from .base import ApiModel


class UserCounts(ApiModel):
    total_users: int = 0
    pro_users: int = 0
    free_users: int = 0
    
    @field_validator("total_users", "pro_users", "free_users", mode="before")
    @classmethod
    def _count_default(cls, value):
        return 0 if value is None else value


class AnalysisCounts(ApiModel):
    total_analyses: int = 0
    avg_score: Optional[float] = None
    
    @field_validator("total_analyses", mode="before")
    @classmethod
    def _count_default(cls, value):
        return 0 if value is None else value


class JobCounts(ApiModel):
    total_jobs: int = 0
    
    @field_validator("total_jobs", mode="before")
    @classmethod
    def _count_default(cls, value):
        return 0 if value is None else value


class AdminStats(ApiModel):
    """Platform totals. The API returns counts as strings."""
    users: UserCounts = Field(default_factory=UserCounts)
    analyses: AnalysisCounts = Field(default_factory=AnalysisCounts)
    jobs: JobCounts = Field(default_factory=JobCounts)
    
    def _share(self, count: int) -> float:
        if not self.users.total_users:
            return 0.0
        return count / self.users.total_users * 100
    
    @property
    def pro_share(self) -> float:
        return self._share(self.users.pro_users)
    
    @property
    def free_share(self) -> float:
        return self._share(self.users.free_users)

"""Job listing models."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .base import ApiModel, coerce_id, none_to_list


class Job(ApiModel):
    """Represents a scraped job posting."""
    id: str
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None
    company_website: Optional[str] = None
    employment_type: Optional[str] = None
    remote_type: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return coerce_id(value)
    
    @property
    def employment_label(self) -> str:
        return self.employment_type or "Full Time"


class JobPage(ApiModel):
    """One page of the job listing."""
    jobs: List[Job] = Field(default_factory=list)
    total: Optional[int] = None
    page: int = 1
    limit: Optional[int] = None
    
    @field_validator("jobs", mode="before")
    @classmethod
    def _jobs_default(cls, value):
        return none_to_list(value)
    
    @property
    def has_next(self) -> bool:
        if self.total is None or not self.limit:
            return False
        return self.page * self.limit < self.total
    
    @property
    def has_previous(self) -> bool:
        return self.page > 1

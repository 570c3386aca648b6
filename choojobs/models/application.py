"""Job application and saved job models."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from .base import ApiModel, coerce_id


class Application(ApiModel):
    """Represents a submitted job application."""
    id: str
    job_id: str
    resume_id: Optional[str] = None
    job_title: Optional[str] = None
    company: Optional[str] = None
    status: str = "pending"  # pending, reviewed, rejected, accepted, withdrawn
    applied_at: Optional[datetime] = None
    cover_letter: Optional[str] = None
    
    @field_validator("id", "job_id", "resume_id", mode="before")
    @classmethod
    def _stringify_ids(cls, value):
        return coerce_id(value)
    
    @property
    def is_withdrawn(self) -> bool:
        return self.status == "withdrawn"


class ApplicationStatus(ApiModel):
    """Whether the user already applied to a job."""
    applied: bool = False
    status: Optional[str] = None


class SavedJob(ApiModel):
    """A job bookmarked by the user."""
    saved_id: Optional[str] = None
    job_id: str
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    saved_at: Optional[datetime] = None
    
    @field_validator("saved_id", "job_id", mode="before")
    @classmethod
    def _stringify_ids(cls, value):
        return coerce_id(value)

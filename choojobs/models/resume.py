"""Resume related data models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from .base import ApiModel, coerce_id


class Resume(ApiModel):
    """Represents an uploaded resume."""
    id: str
    filename: str
    created_at: Optional[datetime] = None
    
    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return coerce_id(value)


class ResumeExport(BaseModel):
    """An exported resume file ready for download."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

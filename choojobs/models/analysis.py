"""AI match analysis result."""

from typing import List, Optional

from pydantic import Field, field_validator

from .base import ApiModel, none_to_list


class AnalysisResult(ApiModel):
    """Match score and feedback for a resume against a job."""
    score: Optional[float] = None
    match_summary: str = ""
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    
    @field_validator("strengths", "weaknesses", "recommendations", mode="before")
    @classmethod
    def _lists_default(cls, value):
        return none_to_list(value)
    
    @field_validator("match_summary", mode="before")
    @classmethod
    def _summary_default(cls, value):
        return value or ""
    
    @property
    def percent(self) -> int:
        """Score as a whole percentage clamped to 0..100."""
        if self.score is None:
            return 0
        return max(0, min(100, round(self.score)))
    
    @property
    def top_strengths(self) -> List[str]:
        return self.strengths[:3]
    
    @property
    def top_weaknesses(self) -> List[str]:
        return self.weaknesses[:3]

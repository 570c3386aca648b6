"""Shared base for API records."""

from typing import Any

from pydantic import BaseModel, ValidationError

from choojobs.exceptions import ApiError


class ApiModel(BaseModel):
    """Base model for API records: unknown fields are ignored."""
    
    class Config:
        extra = "ignore"
        populate_by_name = True
    
    @classmethod
    def from_api(cls, data: Any):
        """
        Parse a record received from the API.
        
        Raises:
            ApiError: If the record does not have the expected shape
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ApiError(f"Unexpected {cls.__name__} record from the API: {e}") from e


def coerce_id(value: Any) -> Any:
    """The API sends ids as numbers or UUID strings; keep them as strings."""
    if value is None:
        return value
    return str(value)


def none_to_list(value: Any) -> Any:
    """The API sends null for empty lists."""
    return [] if value is None else value
